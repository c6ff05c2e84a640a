import pytest

from torrest.log import (
    CallbackHandler,
    LogLevel,
    add_callback_sink,
    add_file_sink,
    add_logger_sink,
    clear_sinks,
    create_logger,
    get_logger_sinks,
)


@pytest.fixture
def sinks():
    current = get_logger_sinks()
    saved = list(current)
    clear_sinks()
    yield current
    for handler in current:
        if handler not in saved:
            handler.close()
    current[:] = saved


@pytest.mark.parametrize(
    "text, expected",
    [
        ("INFO", LogLevel.INFO),
        ("trace", LogLevel.TRACE),
        ("warn", LogLevel.WARN),
        ("warning", LogLevel.WARN),
        ("err", LogLevel.ERR),
        ("Error", LogLevel.ERR),
        ("critical", LogLevel.CRITICAL),
        ("off", LogLevel.OFF),
    ],
)
def test_parse_levels(text, expected):
    assert LogLevel.parse(text) is expected


def test_parse_invalid():
    with pytest.raises(ValueError):
        LogLevel.parse("verbose")


def test_parsed_levels_are_ordered_integers():
    names = ["trace", "debug", "info", "warn", "err", "critical", "off"]
    levels = [LogLevel.parse(name) for name in names]
    assert [int(level) for level in levels] == list(range(len(names)))
    logging_levels = [level.logging_level for level in levels]
    assert logging_levels == sorted(logging_levels)


def test_clear_sinks_empties_list(sinks):
    add_callback_sink(lambda level, message: None)
    assert len(get_logger_sinks()) == 1
    clear_sinks()
    assert get_logger_sinks() == []


def test_callback_sink_receives_messages(sinks):
    received = []
    add_callback_sink(lambda level, message: received.append((level, message)))
    logger = create_logger("cb")
    logger.warning("hello %s", "there")
    logger.debug("hidden")
    assert received == [(LogLevel.WARN, "hello there")]


def test_logger_takes_snapshot_of_sinks(sinks):
    first, second = [], []
    add_callback_sink(lambda level, message: first.append(message))
    logger = create_logger("snap")
    add_callback_sink(lambda level, message: second.append(message))
    logger.error("boom")
    assert first == ["boom"]
    assert second == []


def test_logger_level_can_be_lowered(sinks):
    received = []
    add_logger_sink(CallbackHandler(lambda level, message: received.append(level)))
    logger = create_logger("lvl")
    logger.setLevel(LogLevel.TRACE.logging_level)
    logger.log(LogLevel.TRACE.logging_level, "trace message")
    logger.critical("critical message")
    assert received == [LogLevel.TRACE, LogLevel.CRITICAL]


def test_file_sink_writes_formatted_lines(sinks, tmp_path):
    path = tmp_path / "out.log"
    handler = add_file_sink(str(path))
    create_logger("files").info("hello")
    handler.close()
    content = path.read_text(encoding="utf-8")
    assert "info [files]" in content
    assert content.rstrip().endswith("hello")


def test_file_sink_truncate(sinks, tmp_path):
    path = tmp_path / "out.log"
    path.write_text("old line\n", encoding="utf-8")
    handler = add_file_sink(str(path), truncate=True)
    create_logger("trunc").info("new")
    handler.close()
    content = path.read_text(encoding="utf-8")
    assert "old line" not in content
    assert "new" in content


def test_file_sink_append(sinks, tmp_path):
    path = tmp_path / "out.log"
    path.write_text("old line\n", encoding="utf-8")
    handler = add_file_sink(str(path))
    create_logger("app").info("new")
    handler.close()
    content = path.read_text(encoding="utf-8")
    assert content.startswith("old line\n")
    assert "new" in content
import pytest

from torrest.mime_application import application_types


@pytest.mark.parametrize(
    ("extension", "mime"),
    [
        (".pdf", "application/pdf"),
        (".torrent", "application/x-bittorrent"),
        (".json", "application/json"),
        (".zip", "application/zip"),
        (".bin", "application/octet-stream"),
        (".srt", "application/x-subrip"),
    ],
)
def test_known_extensions(extension, mime):
    assert application_types()[extension] == mime


def test_first_registration_wins_for_duplicates():
    assert application_types()[".wmz"] == "application/x-ms-wmz"


def test_all_values_are_generic_application_types():
    for mime in application_types().values():
        assert mime.startswith("application/")
        assert not mime.startswith("application/vnd.")


def test_all_keys_are_lowercase_extensions():
    for extension in application_types():
        assert extension.startswith(".")
        assert extension == extension.lower()
        assert len(extension) > 1


def test_returns_independent_copy():
    first = application_types()
    first[".pdf"] = "changed"
    del first[".zip"]
    second = application_types()
    assert second[".pdf"] == "application/pdf"
    assert ".zip" in second


def test_unknown_extension_absent():
    types = application_types()
    assert ".mp4" not in types
    assert ".docx" not in types
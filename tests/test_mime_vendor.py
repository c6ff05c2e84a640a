import pytest

from torrest.mime_vendor import vendor_types


@pytest.mark.parametrize(
    "extension, expected",
    [
        (".apk", "application/vnd.android.package-archive"),
        (".xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
        (".docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
        (".odt", "application/vnd.oasis.opendocument.text"),
        (".m3u8", "application/vnd.apple.mpegurl"),
        (".rm", "application/vnd.rn-realmedia"),
        (".ppt", "application/vnd.ms-powerpoint"),
        (".kml", "application/vnd.google-earth.kml+xml"),
        (".123", "application/vnd.lotus-1-2-3"),
    ],
)
def test_known_extensions(extension, expected):
    assert vendor_types()[extension] == expected


def test_every_type_is_vendor_application():
    assert all(mime.startswith("application/vnd.") for mime in vendor_types().values())


def test_every_key_is_dotted_lowercase_extension():
    for extension in vendor_types():
        assert extension.startswith(".")
        assert extension == extension.lower()
        assert len(extension) > 1


def test_aliases_share_a_type():
    types = vendor_types()
    assert types[".xls"] == types[".xlt"] == types[".xlw"]
    assert types[".vsd"] == types[".vss"] == types[".vsw"]
    assert types[".pcap"] == types[".cap"] == types[".dmp"]


def test_unknown_extension_absent():
    types = vendor_types()
    assert ".mp4" not in types
    assert ".pdf" not in types


def test_returns_fresh_copy():
    first = vendor_types()
    first[".apk"] = "changed"
    del first[".xlsx"]
    second = vendor_types()
    assert second[".apk"] == "application/vnd.android.package-archive"
    assert ".xlsx" in second


def test_repeated_calls_agree_on_values():
    first = vendor_types()
    second = vendor_types()
    assert first == second
    assert first[".pdb"] == "application/vnd.palm"
    assert second[".oprc"] == "application/vnd.palm"
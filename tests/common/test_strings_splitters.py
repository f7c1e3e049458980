from mediarank.common.strings.splitters import clean_text, csv_to_list


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_list_input():
    assert csv_to_list([" a ", "b", "", "  "]) == ["a", "b"]


def test_csv_to_list_string_input():
    assert csv_to_list(" a, b ,c ,, d ") == ["a", "b", "c", "d"]


def test_clean_text():
    assert clean_text(None) is None
    assert clean_text("   ") is None
    assert clean_text("  great film ") == "great film"

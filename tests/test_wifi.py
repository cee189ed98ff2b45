import pytest

from coursekit.wifi import (
    Wifi,
    WifiList,
    count_lines,
    format_wifi_table,
    main,
    parse_wifi_line,
    read_wifi_file,
    sort_by_strength,
)

HEADER = "SSID Strength Channel Bandwidth Frequency MaxRate\n"
ROWS = [
    "HomeNet -45, 6 20 2.412 72.2\n",
    "CafeGuest -70, 11 20 2.462 54.0\n",
    "Office5G -55, 36 80 5.180 866.7\n",
]


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(HEADER + "".join(ROWS), encoding="utf-8")
    return path


def test_parse_wifi_line_fields():
    wifi = parse_wifi_line("HomeNet -45, 6 20 2.412 72.2\n")
    assert wifi == Wifi("HomeNet", -45, 6, 20.0, 2.412, 72.2)


def test_parse_wifi_line_skips_one_char_after_strength():
    assert parse_wifi_line("Lab -60% 1 40 2.4 150").channel == 1
    assert parse_wifi_line("Lab -60 1 40 2.4 150").signal_strength == -60


def test_parse_wifi_line_malformed():
    with pytest.raises(ValueError):
        parse_wifi_line("OnlyName -40")


def test_read_wifi_file_skips_header(data_file):
    networks = read_wifi_file(data_file)
    assert [w.ssid for w in networks] == ["HomeNet", "CafeGuest", "Office5G"]
    assert networks[2].channel == 36


def test_read_wifi_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_wifi_file(tmp_path / "absent.txt")


def test_count_lines_matches_records(data_file):
    assert count_lines(data_file) - 1 == len(read_wifi_file(data_file))


def test_format_wifi_table_structure():
    networks = [Wifi("HomeNet", -45, 6, 20.0, 2.412, 72.2)]
    lines = format_wifi_table(networks).split("\n")
    assert set(lines[0]) == {"="}
    assert set(lines[2]) == {"-"}
    assert len(lines[0]) == len(lines[2])
    assert lines[1].startswith("SSID".ljust(20) + "Strength".ljust(15))
    assert lines[3].startswith("HomeNet".ljust(20) + "-45".ljust(15) + "6".ljust(10))
    assert "2.412" in lines[3]
    assert lines[4] == lines[0]
    assert format_wifi_table(networks).endswith("\n\n\n")


def test_format_wifi_table_empty_has_no_rows():
    assert len(format_wifi_table([]).split("\n")) == 7


def test_sort_by_strength(data_file):
    networks = read_wifi_file(data_file)
    before = sorted(w.ssid for w in networks)
    sort_by_strength(networks)
    strengths = [w.signal_strength for w in networks]
    assert strengths == sorted(strengths)
    assert sorted(w.ssid for w in networks) == before


def test_wifi_list_append_and_iterate(data_file):
    networks = read_wifi_file(data_file)
    wifi_list = WifiList()
    for wifi in networks:
        wifi_list.append(wifi)
    assert len(wifi_list) == len(networks)
    assert list(wifi_list) == networks


def test_wifi_list_stores_copies():
    original = Wifi("HomeNet", -45, 6, 20.0, 2.412, 72.2)
    wifi_list = WifiList([original])
    original.channel = 99
    assert next(iter(wifi_list)).channel == 6


def test_wifi_list_search(data_file):
    wifi_list = WifiList(read_wifi_file(data_file))
    assert wifi_list.search_ssid("CafeGuest").signal_strength == -70
    assert wifi_list.search_ssid("Nowhere") is None


def test_main_sorts_output(data_file, capsys):
    assert main([str(data_file)]) == 0
    out = capsys.readouterr().out
    final = out.split("SSID")[-1]
    assert final.index("CafeGuest") < final.index("Office5G") < final.index("HomeNet")


def test_main_concatenates_files(data_file, tmp_path, capsys):
    second = tmp_path / "data2.txt"
    second.write_text(HEADER + "Extra -30, 1 20 2.412 72.2\n", encoding="utf-8")
    assert main([str(data_file), str(second)]) == 0
    out = capsys.readouterr().out
    final = out.split("SSID")[-1]
    assert final.index("HomeNet") < final.index("Extra")
    assert out.count("SSID") == 3


def test_main_search(data_file, capsys):
    assert main([str(data_file), "--search", "Office5G"]) == 0
    assert "Office5G is found" in capsys.readouterr().out
    assert main([str(data_file), "--search", "Nowhere"]) == 0
    assert "No match found." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Cannot open the file" in capsys.readouterr().out
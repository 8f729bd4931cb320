import json

from numconv.cli import main


def test_decode(capsys):
    assert main(["decode", " 1101 "]) == 0
    assert capsys.readouterr().out.strip() == "-3"


def test_decode_rejects_bad_text(capsys):
    assert main(["decode", "12"]) == 1
    assert capsys.readouterr().err.strip() == "Invalid input: Enter only 0s and 1s."


def test_encode(capsys):
    assert main(["encode", "-5", "8"]) == 0
    assert capsys.readouterr().out.strip() == "11111011"


def test_encode_out_of_range(capsys):
    assert main(["encode", "128", "8"]) == 1
    assert capsys.readouterr().err.startswith("Error: 128 does not fit in 8 bits")


def test_encode_non_numeric(capsys):
    assert main(["encode", "five", "8"]) == 1
    assert capsys.readouterr().err.strip() == "Error: Invalid input."


def test_xyz_six_decimals(capsys):
    assert main(["xyz", "0", "0", "0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "x = 6378137.000000"
    assert out[1].startswith("y = ") and out[2].startswith("z = ")


def test_xyz_json(capsys):
    assert main(["--json", "xyz", "0", "90", "--ellipsoid", "grs80"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert set(data) == {"x_m", "y_m", "z_m"}
    assert round(data["y_m"], 3) == 6378137.0


def test_utm_zone(capsys):
    assert main(["utm-zone", "-10", "175"]) == 0
    assert capsys.readouterr().out.strip() == "UTM Zone: 60S"

    assert main(["utm-zone", "60.4", "5.3", "--exceptions"]) == 0
    assert capsys.readouterr().out.strip() == "UTM Zone: 32N"


def test_utm_zone_invalid(capsys):
    assert main(["utm-zone", "0", "181"]) == 1
    assert capsys.readouterr().err.startswith("Error: longitude 181.0")


def test_nan_is_invalid_input(capsys):
    assert main(["xyz", "nan", "0", "0"]) == 1
    assert capsys.readouterr().err.strip() == "Error: Invalid input."
    assert main(["utm-zone", "0", "NaN"]) == 1
    assert capsys.readouterr().err.strip() == "Error: Invalid input."


def test_decode_too_wide(capsys):
    assert main(["decode", "1" * 65]) == 1
    assert capsys.readouterr().err.startswith("Error: 65-bit input exceeds supported maximum of 64 bits")


def test_verbose_logs_debug(caplog, capsys):
    assert main(["-v", "decode", "0101"]) == 0
    assert any(r.getMessage() == "decode 0101 -> 5" for r in caplog.records)

    caplog.clear()
    assert main(["decode", "0101"]) == 0
    assert not [r for r in caplog.records if r.levelname == "DEBUG"]

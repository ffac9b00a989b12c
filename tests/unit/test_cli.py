import pytest

from coinscale.cli import main


def _run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out.strip(), captured.err.strip()


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["to-rate", "3", "--buy", "generic", "--sell", "generic"], "300000000000000000000000000000000000000"),
        (["to-rate", "3", "--buy", "generic", "--sell", "generic", "--op", "ASK"], "33333333333333333333333333333333333334"),
        (["to-rate", "1.0", "--buy", "generic", "--sell", "reference"], str(10 ** 29)),
        (["to-rate", "0" * 5000 + "1.0", "--buy", "Generic", "--sell", "REFERENCE"], str(10 ** 29)),
        (["from-rate", str(100 * 10 ** 38), "--buy", "generic", "--sell", "generic"], "100.0"),
        (["from-rate", str(100 * 10 ** 38), "--buy", "generic", "--sell", "generic", "--op", "ASK"], "0.01"),
        (["from-rate", str(10 ** 29), "--buy", "generic", "--sell", "reference", "--float"], "1.0"),
        (["to-base-units", "1", "--buy", "reference", "--sell", "generic", "--op", "BID"], "1000000000"),
        (["to-base-units", "1", "--buy", "reference", "--sell", "generic", "--op", "ASK"], str(10 ** 18)),
        (["from-base-units", str(10 ** 18), "--buy", "reference", "--sell", "generic", "--op", "BID"], "1000000000.0"),
        (["from-base-units", str(10 ** 18), "--buy", "generic", "--sell", "reference", "--op", "BID", "--float"], "1.0"),
    ],
)
def test_cli_conversions(capsys, argv, expected):
    code, out, err = _run(capsys, *argv)
    print(f"[cli] {' '.join(argv)} -> code={code}, out={out!r}")
    assert code == 0
    assert out == expected
    assert err == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["to-rate", "0", "--buy", "generic", "--sell", "generic"],
        ["to-rate", "abc", "--buy", "generic", "--sell", "generic"],
        ["to-rate", "1", "--buy", "reference", "--sell", "reference"],
        ["to-rate", "9" * 5000, "--buy", "generic", "--sell", "generic"],
        ["from-base-units", "0", "--buy", "generic", "--sell", "generic", "--op", "ASK"],
    ],
)
def test_cli_conversion_errors_exit_2(capsys, argv):
    code, out, err = _run(capsys, *argv)
    print(f"[cli-error] {' '.join(argv)} -> code={code}, err={err!r}")
    assert code == 2
    assert out == ""
    assert err.startswith("error: ")


def test_cli_usage_errors_exit_via_argparse(capsys):
    print("[cli-usage] quantity commands require --op; rates need integers")
    with pytest.raises(SystemExit) as ei:
        main(["to-base-units", "1", "--buy", "generic", "--sell", "generic"])
    assert ei.value.code == 2
    with pytest.raises(SystemExit):
        main(["from-rate", "1.5", "--buy", "generic", "--sell", "generic"])
    with pytest.raises(SystemExit):
        main(["to-rate", "1", "--buy", "deso", "--sell", "generic"])


def test_cli_debug_prints_scaling_steps(capsys):
    code, out, _ = _run(capsys, "--debug", "to-rate", "3", "--buy", "generic", "--sell", "generic")
    assert code == 0
    assert "parse: text='3'" in out
    assert out.splitlines()[-1] == "300000000000000000000000000000000000000"

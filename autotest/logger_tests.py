import numpy as np
import pytest


def logger_echo_test(capsys):
    from pydense import Logger
    log = Logger(True)
    assert log.echo
    assert log.filename is None
    log.statement("hello")
    log.log("work")
    assert "work" in log.items
    log.log("work")
    assert "work" not in log.items
    out = capsys.readouterr().out
    assert "hello" in out
    assert "starting: work" in out
    assert "finished: work took:" in out


def logger_file_test(tmp_path):
    from pydense import Logger
    filename = str(tmp_path / "test.log")
    log = Logger(filename)
    log.statement("a statement")
    log.close()
    log.close()
    with open(filename, "r") as f:
        text = f.read()
    assert "starting: opening " + filename + " for logging" in text
    assert "a statement" in text


def logger_warn_test():
    from pydense import Logger, PydenseWarning
    log = Logger(False)
    with pytest.warns(PydenseWarning):
        log.warn("careful")


def logger_lraise_test(tmp_path):
    from pydense import Logger
    filename = str(tmp_path / "raise.log")
    log = Logger(filename)
    with pytest.raises(Exception):
        log.lraise("generic")
    with pytest.raises(ValueError):
        log.lraise("bad value", ValueError)
    # the file stays open for later records
    assert log.f is not None
    log.statement("after the error")
    log.close()
    with open(filename, "r") as f:
        text = f.read()
    assert "ERROR: generic" in text
    assert "ERROR: bad value" in text
    assert "after the error" in text


def logger_lraise_silent_test(capsys):
    from pydense import Logger
    with pytest.raises(KeyError):
        Logger(False).lraise("quiet", KeyError)
    assert capsys.readouterr().out == ""
    with pytest.raises(KeyError):
        Logger(True).lraise("loud", KeyError)
    assert "ERROR: loud" in capsys.readouterr().out


def check_dtype_test():
    from pydense._dtypes import check_dtype
    assert check_dtype(float) == np.float64
    assert check_dtype("int32") == np.int32
    assert check_dtype(np.uint8) == np.uint8
    assert check_dtype(complex) == np.complex128
    assert check_dtype(object) == np.dtype(object)
    for bad in [bool, str, "datetime64[s]", "V8"]:
        with pytest.raises(TypeError):
            check_dtype(bad)


def parse_scalar_test():
    from pydense._dtypes import parse_scalar
    assert parse_scalar("3", np.dtype(np.int16)) == 3
    assert parse_scalar("2.5", np.dtype(np.float64)) == 2.5
    assert parse_scalar("(1+2j)", np.dtype(np.complex128)) == 1 + 2j
    assert parse_scalar("0.25", np.dtype(object)) == 0.25
    with pytest.raises(ValueError):
        parse_scalar("2.5", np.dtype(np.int64))
    with pytest.raises(OverflowError):
        parse_scalar("-1", np.dtype(np.uint8))


def parse_scalar_strict_test():
    from pydense._dtypes import parse_scalar
    for token in ["1_000", "\u0661\u0662"]:
        for dtype in [np.int64, np.float64, object]:
            with pytest.raises(ValueError):
                parse_scalar(token, np.dtype(dtype))
    for token in ["nan", "NaN", "inf", "-inf", "+Infinity", "nanj"]:
        for dtype in [np.float64, np.float32, np.complex128, object]:
            with pytest.raises(ValueError):
                parse_scalar(token, np.dtype(dtype))
    assert parse_scalar("-1e3", np.dtype(np.float64)) == -1000.0

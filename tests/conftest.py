"""Shared fixtures for lexgram tests."""

import pytest

SUBTLEX_HEADER = (
    "Word,FREQcount,CDcount,FREQlow,Cdlow,SUBTLWF,Lg10WF,SUBTLCD,Lg10CD,"
    "Dom_PoS_SUBTLEX,Freq_dom_PoS_SUBTLEX,Percentage_dom_PoS,All_PoS_SUBTLEX,"
    "All_freqs_SUBTLEX,Zipf-value"
)

APPLE = "apple,100,50,80,40,1.5,0.176,2.3,0.362,noun,90,0.9,noun,90,3.5"
BANANA = "banana,200,75,150,60,2.8,0.447,3.1,0.491,noun,180,0.9,noun,180,4.2"
CHERRY = "cherry,50,25,40,20,0.9,0.954,1.7,0.230,noun,45,0.9,noun,45,2.8"


@pytest.fixture
def write_file(tmp_path):
    """Write text to a fresh file under tmp_path and return its path."""
    counter = iter(range(1000))

    def _write(content: str, suffix: str = ".csv"):
        path = tmp_path / f"input_{next(counter)}{suffix}"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def subtlex_csv(write_file):
    """Factory: SUBTLEX CSV with the standard header and the given rows."""

    def _make(*rows: str):
        return write_file("\n".join([SUBTLEX_HEADER, *rows]) + "\n")

    return _make


@pytest.fixture
def fruit_csv(subtlex_csv):
    return subtlex_csv(APPLE, BANANA, CHERRY)


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let configure_logging run again, restoring lexgram's level afterwards."""
    import logging

    from lexgram import _logging

    logger = logging.getLogger("lexgram")
    saved = logger.level
    monkeypatch.setattr(_logging, "_CONFIGURED", False)
    yield logger
    logger.setLevel(saved)

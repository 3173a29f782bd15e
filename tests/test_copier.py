import pytest

from patternkit.copier import Data, Pillar, PullError, System, Xenia, copy, main


class FixedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop
        return value


class ScriptedPuller:
    def __init__(self, count, error=None):
        self._remaining = count
        self._error = error if error is not None else EOFError()
        self.pulled = 0

    def pull(self):
        if self._remaining == 0:
            raise self._error
        self._remaining -= 1
        self.pulled += 1
        return Data(f"line{self.pulled}")


class RecordingStorer:
    def __init__(self, fail_on=None):
        self.stored = []
        self._fail_on = fail_on

    def store(self, data):
        if data.line == self._fail_on:
            raise OSError("store failed")
        self.stored.append(data)


@pytest.mark.parametrize("roll", [1, 9])
def test_xenia_end_of_data(roll):
    with pytest.raises(EOFError):
        Xenia(FixedRng([roll])).pull()


def test_xenia_failure():
    with pytest.raises(PullError, match="Error reading data from Xenia"):
        Xenia(FixedRng([5])).pull()


def test_xenia_returns_data(capsys):
    assert Xenia(FixedRng([0])).pull() == Data("Data")
    assert capsys.readouterr().out == "In: Data\n"


def test_pillar_prints(capsys):
    Pillar().store(Data("Data"))
    assert capsys.readouterr().out == "Out: Data\n"


def test_copy_stores_everything_until_end():
    puller = ScriptedPuller(5)
    storer = RecordingStorer()
    assert copy(System(puller, storer), 3) == 5
    assert [d.line for d in storer.stored] == [f"line{i}" for i in range(1, 6)]


def test_copy_stores_partial_batch_before_raising():
    puller = ScriptedPuller(4, PullError("boom"))
    storer = RecordingStorer()
    with pytest.raises(PullError, match="boom"):
        copy(System(puller, storer), 3)
    assert len(storer.stored) == puller.pulled


def test_copy_propagates_store_error():
    storer = RecordingStorer(fail_on="line2")
    with pytest.raises(OSError, match="store failed"):
        copy(System(ScriptedPuller(10), storer), 3)
    assert [d.line for d in storer.stored] == ["line1"]


def test_copy_empty_source():
    storer = RecordingStorer()
    assert copy(System(ScriptedPuller(0), storer), 3) == 0
    assert storer.stored == []


def test_copy_rejects_bad_batch():
    with pytest.raises(ValueError):
        copy(System(ScriptedPuller(1), RecordingStorer()), 0)


def test_system_with_seeded_xenia(capsys):
    rng = FixedRng([0, 0, 0, 0, 1])
    total = copy(System(Xenia(rng), Pillar()), 3)
    out = capsys.readouterr().out
    assert total == out.count("In: Data")
    assert out.count("Out: Data") == total


def test_main_returns_zero():
    assert main([]) == 0
import json
import random

from evilhangman.engine import Difficulty
from evilhangman.game import HangmanManager
from apps.cli import play, run


def _scripted(answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_play_round_loss_reveals_a_candidate():
    m = HangmanManager(["dog", "cat", "car"], rng=random.Random(0))
    m.prepare_round(3, 2, Difficulty.HARD)
    out = []
    # 'a' reveals, repeated 'a' and 'zz' are rejected for free, then two misses
    won = play.play_round(m, read=_scripted(["a", "a", "zz", "z", "q"]), write=out.append)
    assert won is False
    assert m.guesses_left() == 0
    assert any("Try again" in line for line in out)
    assert out[-1] in {"Sorry, you lose. The word was cat.", "Sorry, you lose. The word was car."}


def test_play_round_rejects_non_letters_for_free():
    m = HangmanManager(["dog"])
    m.prepare_round(3, 1, Difficulty.HARD)
    out = []
    won = play.play_round(m, read=_scripted(["1", "?", "d", "o", "g"]), write=out.append)
    assert won is True
    assert m.guesses_made() == "[d, g, o]"
    assert sum("not a single letter" in line for line in out) == 2


def test_play_round_win():
    m = HangmanManager(["dog"])
    m.prepare_round(3, 1, Difficulty.EASY)
    out = []
    won = play.play_round(m, read=_scripted(["d", "o", "g"]), write=out.append)
    assert won is True
    assert out[-1] == "You win! The word was dog."


def test_run_cli_writes_outputs(tmp_path):
    d = tmp_path / "dictionary.txt"
    d.write_text("cat\ncar\ncab\ndog\ndig\nfig\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = run.main(["--dictionary", str(d), "--N", "3", "--rounds", "3", "--player", "random_letter",
                   "--difficulty", "medium", "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    manifests = list(outdir.glob("*_manifest.json"))
    assert len(manifests) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_rounds"] == 3
    assert manifest["config"]["difficulty"] == "medium"
    rows = list(outdir.glob("run_*.csv"))[0].read_text(encoding="utf-8").splitlines()
    assert len(rows) == 4 and rows[0].startswith("player,N,difficulty")


def test_run_cli_unknown_length(tmp_path):
    d = tmp_path / "dictionary.txt"
    d.write_text("cat\n", encoding="utf-8")
    assert run.main(["--dictionary", str(d), "--N", "7", "--outdir", str(tmp_path)]) == 2

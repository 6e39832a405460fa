"""Tests for the Monte Carlo simulations and command-line tools."""

from __future__ import annotations

import argparse
import io

import pytest

from simulations import draw
from simulations.common import ExperimentResult, ExperimentSpec, summarize_rates
from simulations.methods import METHODS, ModuloRandom, default_tiers, get_method
from simulations.run import run_experiment, run_pair


def test_experiment_spec_validation() -> None:
    with pytest.raises(ValueError):
        ExperimentSpec(capacity=0, stream=5)
    with pytest.raises(ValueError):
        ExperimentSpec(capacity=2, stream=-1)
    with pytest.raises(ValueError):
        ExperimentSpec(capacity=2, stream=5, trials=0)


def test_expected_rate() -> None:
    assert ExperimentSpec(capacity=3, stream=12).expected_rate == pytest.approx(0.25)
    assert ExperimentSpec(capacity=8, stream=4).expected_rate == 1.0
    assert ExperimentSpec(capacity=8, stream=0).expected_rate == 0.0


def test_experiment_result_checks_totals() -> None:
    spec = ExperimentSpec(capacity=2, stream=3, trials=2)
    with pytest.raises(ValueError):
        ExperimentResult(method="x", spec=spec, counts=[1, 1, 1])
    with pytest.raises(ValueError):
        ExperimentResult(method="x", spec=spec, counts=[2, 2])

    ok = ExperimentResult(method="x", spec=spec, counts=[2, 1, 1])
    assert ok.rates == [1.0, 0.5, 0.5]


def test_summarize_rates() -> None:
    s = summarize_rates([0.2, 0.4], expected=0.25)
    assert s.min == 0.2
    assert s.max == 0.4
    assert s.mean == pytest.approx(0.3)
    assert s.std == pytest.approx(0.1)
    assert s.max_abs_dev == pytest.approx(0.15)


def test_get_method() -> None:
    assert get_method(" Reservoir ") is METHODS["reservoir"]
    with pytest.raises(ValueError):
        get_method("nope")


def test_default_tiers() -> None:
    assert default_tiers(1) == [1]
    assert default_tiers(2) == [1, 1]
    assert default_tiers(10) == [1, 1, 8]


def test_modulo_random_stays_in_range() -> None:
    rng = ModuloRandom(seed=5)
    for k in range(1, 60):
        assert 1 <= rng.randint(1, k) <= k


@pytest.mark.parametrize("method", ["reservoir", "modulo", "lottery"])
def test_random_methods_are_uniform(method: str) -> None:
    result = run_experiment(method, capacity=4, stream=16, trials=4000, seed=7)
    assert result.stats is not None
    assert result.stats.mean == pytest.approx(0.25)
    assert result.stats.max_abs_dev < 0.04


def test_prefix_method_is_biased() -> None:
    result = run_experiment("prefix", capacity=2, stream=4, trials=10)
    assert result.counts == [10, 10, 0, 0]


def test_lottery_tier_counts() -> None:
    result = run_experiment(
        "lottery", capacity=5, stream=3, trials=50, method_kwargs={"tiers": [2, 3]}
    )
    assert result.meta["tiers"] == [2, 3]
    assert sum(result.meta["tier_counts"]) == 150
    assert result.counts == [50, 50, 50]


def test_lottery_rejects_mismatched_tiers() -> None:
    with pytest.raises(ValueError):
        run_experiment("lottery", capacity=5, stream=3, method_kwargs={"tiers": [1, 1]})


def test_empty_stream() -> None:
    ra, rb = run_pair("reservoir", "lottery", capacity=3, stream=0, trials=5)
    assert ra.counts == [] and ra.stats is None
    assert rb.counts == [] and rb.stats is None


def test_draw_cli_prints_winners() -> None:
    out = io.StringIO()
    code = draw.main(
        ["-p", "first:1", "-p", "second:1", "-p", "third:4", "--seed", "3", "8", "1", "1", "9", "2"],
        out=out,
    )
    assert code == 0

    lines = out.getvalue().splitlines()
    assert [line.split(":")[0] for line in lines] == ["first", "second", "third"]
    winners = []
    for line in lines:
        names = line.split(": ", 1)[1]
        if names != "(none)":
            winners.extend(names.split(", "))
    assert sorted(winners) == ["1", "1", "2", "8", "9"]


def test_draw_cli_reads_stdin_and_shows_pool() -> None:
    out = io.StringIO()
    code = draw.main(
        ["-p", "gold:2", "--seed", "1", "--show-pool"],
        stdin=io.StringIO("alice\n\nbob\ncarol\n"),
        out=out,
    )
    assert code == 0

    lines = out.getvalue().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("#1 alice rank=1")
    assert lines[-1].startswith("gold: ")


def test_draw_cli_reports_empty_stream() -> None:
    out = io.StringIO()
    code = draw.main(["-p", "gold:2"], stdin=io.StringIO(""), out=out)
    assert code == 1
    assert out.getvalue() == ""


def test_draw_cli_reports_bad_position() -> None:
    assert draw.main(["-p", ":2", "x"], out=io.StringIO()) == 1
    assert draw.main(["-p", "gold:0", "x"], out=io.StringIO()) == 1


def test_parse_position() -> None:
    assert draw.parse_position("grand:prize:3") == ("grand:prize", 3)
    with pytest.raises(argparse.ArgumentTypeError):
        draw.parse_position("nocolon")


def test_compare_cli_without_plot(capsys) -> None:
    from simulations import compare

    code = compare.main(
        ["--method-a", "reservoir", "--method-b", "prefix",
         "--capacity", "2", "--stream", "6", "--trials", "300", "--no-plot"]
    )
    assert code == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("reservoir: expected=0.3333")
    assert lines[1].startswith("prefix: expected=0.3333, min=0.0000, max=1.0000")


def test_compare_cli_unknown_method() -> None:
    from simulations import compare

    code = compare.main(
        ["--method-a", "reservoir", "--method-b", "nope",
         "--capacity", "2", "--stream", "6", "--no-plot"]
    )
    assert code == 1

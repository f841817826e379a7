"""Properties every registered simulator must satisfy."""

import pytest

from algorithms import REGISTRY
from algorithms.step import validate_trace


ALL_IDS = list(REGISTRY)


@pytest.mark.parametrize("algorithm_id", ALL_IDS)
def test_trace_is_valid(run, algorithm_id):
    trace = run(algorithm_id)
    validate_trace(trace)
    assert trace[-1].is_final
    assert [s.step_number for s in trace] == list(range(len(trace)))


@pytest.mark.parametrize("algorithm_id", ALL_IDS)
def test_trace_is_deterministic(run, algorithm_id):
    assert run(algorithm_id) == run(algorithm_id)


@pytest.mark.parametrize("algorithm_id", ALL_IDS)
def test_locales_share_structure_but_not_text(run, algorithm_id):
    en, es = run(algorithm_id, "en"), run(algorithm_id, "es")
    assert len(en) == len(es)
    assert [s.data for s in en] == [s.data for s in es]
    assert [s.code_line for s in en] == [s.code_line for s in es]
    assert any(a.description != b.description for a, b in zip(en, es))


@pytest.mark.parametrize("algorithm_id", ALL_IDS)
def test_unknown_locale_matches_english(run, algorithm_id):
    assert run(algorithm_id, "xx") == run(algorithm_id, "en")


@pytest.mark.parametrize("algorithm_id", ALL_IDS)
def test_code_lines_point_into_listing(run, algorithm_id):
    listing = REGISTRY[algorithm_id].pseudocode
    for step in run(algorithm_id):
        if step.code_line is not None:
            assert 0 <= step.code_line < len(listing)


@pytest.mark.parametrize("algorithm_id", ALL_IDS)
def test_every_step_is_self_contained(run, algorithm_id):
    for step in run(algorithm_id):
        d = step.to_dict()
        assert d["kind"] in d
        assert d["description"]

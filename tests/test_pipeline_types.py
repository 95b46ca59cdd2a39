# tests/test_pipeline_types.py
from __future__ import annotations

import dataclasses

import pytest

from charset_sleuth.config import DetectionConfig
from charset_sleuth.pipeline import ChaosReport, CoherenceReport, PipelineContext


def test_chaos_report_mean():
    r = ChaosReport(encoding="cp1252", chunk_ratios=(0.1, 0.2, 0.0), texts=("a", "b", "c"))
    assert r.chaos == 0.1
    assert r.passes(0.1)
    assert not r.passes(0.05)


def test_chaos_report_rounds():
    r = ChaosReport(encoding="cp1252", chunk_ratios=(0.1, 0.1, 0.2), texts=("a",))
    assert r.chaos == 0.133


def test_chaos_report_without_chunks():
    assert ChaosReport(encoding="ascii", chunk_ratios=(), texts=()).chaos == 0.0


def test_chaos_report_peak():
    r = ChaosReport(encoding="ascii", chunk_ratios=(0.22, 0.0, 0.05), texts=("a",))
    assert r.peak == 0.22
    assert ChaosReport(encoding="ascii", chunk_ratios=(), texts=()).peak == 0.0


def test_gave_up_never_passes():
    r = ChaosReport(encoding="cp1252", chunk_ratios=(0.0,), texts=("a",), gave_up=True)
    assert not r.passes(1.0)


def test_chaos_report_is_frozen():
    r = ChaosReport(encoding="cp1252", chunk_ratios=(0.0,), texts=("a",))
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.encoding = "ascii"  # type: ignore[misc]


def test_coherence_report():
    r = CoherenceReport(languages=(("French", 0.8765), ("Italian", 0.5)))
    assert r.coherence == 87.65
    assert CoherenceReport().coherence == 0.0
    assert CoherenceReport().alphabets == ()


def test_pipeline_context_defaults():
    ctx = PipelineContext(data=b"abc", config=DetectionConfig())
    assert ctx.prioritized == []
    assert ctx.rejected == {}


def test_pipeline_context_instances_are_independent():
    a = PipelineContext(data=b"a", config=DetectionConfig())
    b = PipelineContext(data=b"b", config=DetectionConfig())
    a.rejected["cp1252"] = ChaosReport(encoding="cp1252", chunk_ratios=(1.0,), texts=("x",))
    assert b.rejected == {}

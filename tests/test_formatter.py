"""Tests for statistics formatters."""

import json
from io import StringIO

import pytest
from forwardchain.models import ExecutionStatistics
from forwardchain.output import JsonFormatter, TerminalFormatter, get_formatter
from rich.console import Console


@pytest.fixture
def sample_statistics() -> ExecutionStatistics:
  stats = ExecutionStatistics(total_iterations=2, total_time=0.004)
  stats.record_evaluation("Init result", 0.001)
  stats.record_evaluation("Init result", 0.001)
  stats.record_execution("Init result", 0.002)
  return stats


class TestStatisticsModel:
  def test_records_accumulate(self, sample_statistics: ExecutionStatistics) -> None:
    record = sample_statistics.rules["Init result"]

    assert record.evaluations == 2
    assert record.executions == 1
    assert record.evaluation_time == pytest.approx(0.002)
    assert record.execution_time == pytest.approx(0.002)

  def test_for_rule_creates_empty_record(self) -> None:
    stats = ExecutionStatistics()

    record = stats.for_rule("new")

    assert record.evaluations == 0
    assert stats.rules["new"] is record


class TestJsonFormatter:
  def test_serializes_all_fields(self, sample_statistics: ExecutionStatistics) -> None:
    data = json.loads(JsonFormatter().format(sample_statistics))

    assert data["total_iterations"] == 2
    assert data["total_time"] == pytest.approx(0.004)
    assert data["rules"]["Init result"]["evaluations"] == 2
    assert data["rules"]["Init result"]["executions"] == 1


class TestTerminalFormatter:
  def test_prints_table(self, sample_statistics: ExecutionStatistics) -> None:
    buffer = StringIO()
    console = Console(file=buffer, width=120)

    output = TerminalFormatter(console).format(sample_statistics)

    assert output == ""
    rendered = buffer.getvalue()
    assert "Init result" in rendered
    assert "2 iterations" in rendered


class TestGetFormatter:
  def test_known_formats(self) -> None:
    assert isinstance(get_formatter("json"), JsonFormatter)
    assert isinstance(get_formatter("terminal"), TerminalFormatter)

  def test_unknown_format(self) -> None:
    with pytest.raises(ValueError, match="Unknown format"):
      get_formatter("xml")

from unittest.mock import MagicMock, patch

import pytest

from config import settings
from services.brand_assignment import AssignmentSummary


def _summary():
    return AssignmentSummary(
        country_code="lv", source="apotheka", total=3, matched=2, output_path="output/lv/brands_apotheka.json"
    )


def test_assign_brands_task_returns_summary(monkeypatch):
    from workers.tasks import assign_brands_task

    monkeypatch.setattr(settings, "persist_mappings", False)
    with patch("workers.tasks.assign_brands", return_value=_summary()) as assign:
        result = assign_brands_task.run("lv", "apotheka")

    assign.assert_called_once_with("lv", "apotheka", db=None)
    assert result["matched"] == 2
    assert result["total"] == 3


def test_assign_brands_task_commits_when_persisting(monkeypatch):
    from workers.tasks import assign_brands_task

    session = MagicMock()
    monkeypatch.setattr(settings, "persist_mappings", True)
    monkeypatch.setattr(assign_brands_task, "_db", session)
    with patch("workers.tasks.assign_brands", return_value=_summary()) as assign:
        assign_brands_task.run("lv", "apotheka")

    assign.assert_called_once_with("lv", "apotheka", db=session)
    session.commit.assert_called_once()


def test_assign_brands_task_rolls_back_and_reraises(monkeypatch):
    from workers.tasks import assign_brands_task

    session = MagicMock()
    monkeypatch.setattr(settings, "persist_mappings", True)
    monkeypatch.setattr(assign_brands_task, "_db", session)
    with patch("workers.tasks.assign_brands", side_effect=FileNotFoundError("data/pharmacyItems.json")):
        with pytest.raises(FileNotFoundError):
            assign_brands_task.run("lv", "apotheka")

    session.rollback.assert_called_once()
    session.commit.assert_not_called()

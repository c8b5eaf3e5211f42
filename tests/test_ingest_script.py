"""
Ingestion script tests - exit codes of scripts/ingest_products.py against the fake index.
"""

import argparse
import importlib.util
import json
from pathlib import Path

import pytest

from tests.fakes import FakeSearchIndex, make_products

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "ingest_products.py"


@pytest.fixture
def ingest_script():
    module_spec = importlib.util.spec_from_file_location("ingest_products", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def script_index(monkeypatch, ingest_script, ingest_settings) -> FakeSearchIndex:
    index = FakeSearchIndex()
    monkeypatch.setattr(ingest_script, "MeilisearchClient", lambda *args, **kwargs: index)
    monkeypatch.setattr(ingest_script, "get_settings", lambda: ingest_settings)
    return index


def _args(**overrides) -> argparse.Namespace:
    values = {"file": None, "batch_size": None, "last_task_only": False, "smoke_test": False}
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.mark.asyncio
async def test_missing_file_exits_1(ingest_script, script_index, tmp_path):
    code = await ingest_script.ingest(_args(file=str(tmp_path / "missing.json")))

    assert code == 1
    assert script_index.submitted_batches == []
    assert script_index.closed


@pytest.mark.asyncio
async def test_unhealthy_service_exits_1(ingest_script, script_index):
    script_index.healthy = False

    code = await ingest_script.ingest(_args())

    assert code == 1
    assert script_index.closed


@pytest.mark.asyncio
async def test_successful_run_exits_0(ingest_script, script_index, tmp_path):
    data_file = tmp_path / "products.json"
    data_file.write_text(json.dumps(make_products(3)), encoding="utf-8")

    code = await ingest_script.ingest(_args(file=str(data_file), batch_size=2))

    assert code == 0
    assert [len(b) for b in script_index.submitted_batches] == [2, 1]
    assert script_index.closed

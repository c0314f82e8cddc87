# -*- coding: utf-8 -*-
"""
conftest.py – общий корень для тестов tmath.
Каждый тест получает свежий Config, указывающий во временный каталог,
чтобы не читать и не писать tmath.json в рабочей директории.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from tmath.utils.config import Config, ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_VAR, str(tmp_path / "tmath.json"))
    Config.reset()
    yield tmp_path / "tmath.json"
    Config.reset()

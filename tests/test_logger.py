import json

import numpy as np

from mazegen.utils.logger import Logger


def test_log_converts_values():
    logger = Logger()
    logger.log("depth", np.int64(3))
    logger.log("cell", (1, 2))
    logger.log("cell", np.array([2, 2]))
    assert logger.metrics == {"depth": [3], "cell": [[1, 2], [2, 2]]}
    assert logger.summary() == {
        "depth": {"count": 1, "last": 3},
        "cell": {"count": 2, "last": [2, 2]},
    }


def test_save_appends_records(tmp_path):
    path = tmp_path / "logs" / "metrics.json"
    logger = Logger()
    logger.log("depth", 1)
    logger.save(str(path))
    logger.log("depth", 2)
    logger.log("passages", 1)
    logger.save(str(path))

    records = json.loads(path.read_text(encoding="utf-8"))
    assert records == [
        {"step": 1, "depth": 1},
        {"step": 2, "depth": 2, "passages": 1},
    ]


def test_save_without_append_overwrites(tmp_path):
    path = tmp_path / "metrics.json"
    logger = Logger()
    logger.log("depth", 1)
    logger.save(str(path))
    logger.save(str(path), append=False)
    assert len(json.loads(path.read_text(encoding="utf-8"))) == 1


def test_save_recovers_from_corrupt_file(tmp_path, capsys):
    path = tmp_path / "metrics.json"
    path.write_text("{not json", encoding="utf-8")
    logger = Logger()
    logger.log("depth", 4)
    logger.save(str(path))

    assert "Warning: Failed to read" in capsys.readouterr().out
    assert json.loads(path.read_text(encoding="utf-8")) == [{"step": 1, "depth": 4}]


def test_clear():
    logger = Logger()
    logger.log("depth", 1)
    logger.clear()
    assert logger.metrics == {}
    assert logger.summary() == {}

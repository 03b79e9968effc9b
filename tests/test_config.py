# tests/test_config.py - ChainConfig loading and seeded chains
import json
import logging

import pytest

from atom_chain import Chain, ChainConfig, InvalidConfiguration, NumpyRandomSource, load_config
from atom_chain.core.protocols import RandomSource
from atom_chain.utils.config_manager import save_config
from atom_chain.utils.logger_utils import setup_logging, time_block


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.json"))
    assert cfg == ChainConfig()
    assert cfg.order == 1 and cfg.seed is None


def test_load_roundtrip(tmp_path):
    p = tmp_path / "cfg.json"
    save_config(ChainConfig(order=3, seed=11), str(p))
    assert load_config(str(p)) == ChainConfig(order=3, seed=11)


def test_unknown_keys_ignored(tmp_path, caplog):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"order": 2, "colour": "blue"}))
    with caplog.at_level(logging.WARNING):
        cfg = load_config(str(p))
    assert cfg.order == 2
    assert "colour" in caplog.text


@pytest.mark.parametrize("data", [{"order": 0}, {"order": "2"}, {"seed": -1}, {"seed": 1.5}])
def test_bad_values_rejected(data):
    with pytest.raises(InvalidConfiguration):
        ChainConfig.from_dict(data)


def test_bad_json_rejected(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("{order: 2")
    with pytest.raises(InvalidConfiguration):
        load_config(str(p))
    p.write_text("[1, 2]")
    with pytest.raises(InvalidConfiguration):
        load_config(str(p))
    p.write_bytes(b'{"order": 2, "x": "\xff"}')
    with pytest.raises(InvalidConfiguration):
        load_config(str(p))


def test_non_string_keys_ignored():
    cfg = ChainConfig.from_dict({1: "a", "zz": 2, "order": 4})
    assert cfg == ChainConfig(order=4)


def test_seeded_chains_sample_identically():
    def run():
        c = Chain.from_config(ChainConfig(order=1, seed=99))
        c.train_many([[1, 2], [1, 3], [1, 4], [1, 5]])
        return [c.sample([1]) for _ in range(200)]

    assert run() == run()


def test_numpy_source_range():
    src = NumpyRandomSource(seed=3)
    assert isinstance(src, RandomSource)
    draws = [src.randrange(4) for _ in range(200)]
    assert all(isinstance(d, int) for d in draws)
    assert set(draws) == {0, 1, 2, 3}
    with pytest.raises(ValueError):
        src.randrange(0)


def test_time_block_logs_duration(caplog):
    log = logging.getLogger("atom_chain.test")
    with caplog.at_level(logging.DEBUG, logger="atom_chain.test"):
        with time_block("unit", log) as t:
            pass
    assert t.elapsed >= 0
    assert "unit done" in caplog.text


def test_setup_logging_writes_file(tmp_path):
    path = tmp_path / "chain.log"
    logger = setup_logging(logging.DEBUG, str(path))
    try:
        Chain(2)
    finally:
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
    assert "Created chain of order 2" in path.read_text()

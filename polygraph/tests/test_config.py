import pytest

from polygraph.core.config import EditorConfig, NamingConfig
from polygraph.core.stats import OpStats, format_stats_table, print_stats


def test_editor_config_defaults():
    cfg = EditorConfig()
    assert cfg.check_invariants is True
    assert cfg.require_manifold is False
    assert cfg.transactional is False
    assert cfg.naming == NamingConfig()


def test_from_dict_nested_naming():
    cfg = EditorConfig.from_dict({'transactional': True, 'naming': {'mode': 'opaque'}})
    assert cfg.transactional is True
    assert cfg.naming.mode == 'opaque'
    assert cfg.naming.opaque_prefix == 'v'


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="unknown editor config keys"):
        EditorConfig.from_dict({'transactionl': True})
    with pytest.raises(ValueError, match="unknown naming config keys"):
        EditorConfig.from_dict({'naming': {'style': 'concat'}})


def test_naming_mode_validated():
    with pytest.raises(ValueError):
        NamingConfig(mode='random')


def test_op_stats_timing_and_rates():
    s = OpStats()
    s.attempts = 4
    s.success = 3
    s.fail = 1
    s.invariant_rejects = 1
    s.record_time(0.002)
    s.record_time(0.001)
    d = s.to_dict()
    assert d['success_rate'] == 0.75
    assert d['invariant_reject_rate'] == 0.25
    assert d['time_min'] == 0.001
    assert d['time_max'] == 0.002
    assert d['time_avg'] == pytest.approx(0.003 / 4)
    s.reset()
    assert s.to_dict()['attempts'] == 0
    assert s.time_total == 0.0


def test_stats_table_and_print(capsys):
    s = OpStats(attempts=2, success=1, fail=1)
    table = format_stats_table({'truncate': s.to_dict()})
    lines = table.splitlines()
    assert lines[0].split()[0] == 'op'
    assert lines[2].split()[:4] == ['truncate', '2', '1', '1']
    print_stats({'truncate': s.to_dict()}, pretty=False)
    assert "'attempts': 2" in capsys.readouterr().out

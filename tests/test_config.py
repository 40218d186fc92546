"""Tests for router configuration and config files."""

import json

import pytest
import yaml
from expert_router.core.config import RouterConfig, parse_expert_id
from expert_router.core.config_loader import load_config, save_config
from expert_router.core.types import ExpertId, Tier


class TestRouterConfig:
    """Test RouterConfig dataclass."""

    def test_defaults(self):
        config = RouterConfig()
        assert config.strategy == "deterministic"
        assert config.expert_count == 1024
        assert config.temperature == 1.0
        assert config.experts == []
        assert config.gate_weights == {}

    def test_dash_names_normalized(self):
        assert RouterConfig(strategy="round-robin").strategy == "round_robin"

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            RouterConfig(strategy="random")

    def test_non_finite_gate_weight(self):
        with pytest.raises(ValueError, match="finite"):
            RouterConfig(strategy="gating", gate_weights={0: float("nan")})

    @pytest.mark.parametrize(
        "overrides",
        [
            {"expert_count": 5.5},
            {"expert_count": "5"},
            {"expert_count": True},
            {"temperature": "hot"},
            {"temperature": None},
            {"strategy": 3},
            {"experts": 5},
            {"gate_weights": [0.5]},
        ],
    )
    def test_invalid_field_types(self, overrides):
        """Test wrongly typed fields are rejected with ValueError."""
        with pytest.raises(ValueError):
            RouterConfig.from_dict(overrides)

    def test_degenerate_values_accepted(self):
        """Test clamping is left to the routers."""
        config = RouterConfig(expert_count=0, temperature=-1.0)
        strategy = config.to_strategy()
        assert strategy.route(Tier.NANO, 3).indices() == [0, 0]

    def test_to_strategy_gating(self):
        config = RouterConfig(strategy="gating", gate_weights={5: 0.2, 6: 0.8})
        strategy = config.to_strategy()
        assert strategy.kind == "gating"
        assert strategy.route(Tier.NANO, 0).indices() == [6, 5]

    def test_dict_round_trip(self):
        config = RouterConfig(
            strategy="round_robin", experts=[1, 2, 3], gate_weights={1: 0.5}
        )
        assert RouterConfig.from_dict(config.to_dict()) == config

    def test_from_dict_missing_fields(self):
        config = RouterConfig.from_dict({"strategy": "gating", "experts": None})
        assert config.strategy == "gating"
        assert config.experts == []


class TestParseExpertId:
    """Test config-file expert references."""

    def test_int(self):
        assert parse_expert_id(3) == ExpertId.from_index(3)

    def test_digit_string(self):
        assert parse_expert_id("12") == ExpertId.from_index(12)

    def test_hex(self):
        expert = ExpertId.from_index(99)
        assert parse_expert_id(expert.hex()) == expert

    def test_digit_only_hex(self):
        """Test a full-width hex id made of digits is not read as an index."""
        for index in (9, 99, 0x1234):
            expert = ExpertId.from_index(index)
            assert expert.hex().isdigit()
            assert parse_expert_id(expert.hex()) == expert

    def test_hex_surrounding_whitespace(self):
        expert = ExpertId.from_index(9)
        assert parse_expert_id(f" {expert.hex()} ") == expert

    def test_passthrough(self):
        expert = ExpertId.from_index(1)
        assert parse_expert_id(expert) is expert

    @pytest.mark.parametrize("value", ["abc", "zz" * 32, True, 1.5, None])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_expert_id(value)


class TestConfigLoader:
    """Test YAML/JSON config loading and saving."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "router.yaml"
        path.write_text(
            yaml.dump(
                {
                    "strategy": "gating",
                    "temperature": 0.5,
                    "gate_weights": {0: 0.5, 1: 0.3, 2: 0.2},
                }
            )
        )
        config = load_config(path)
        assert config.strategy == "gating"
        assert config.temperature == 0.5
        assert config.to_strategy().route(Tier.NANO, 0).indices() == [0, 1]

    def test_load_json(self, tmp_path):
        path = tmp_path / "router.json"
        path.write_text(json.dumps({"strategy": "round_robin", "experts": [2, 0, 1]}))
        config = load_config(str(path))
        assert config.to_strategy().route(Tier.NANO, 0).indices() == [2, 0]

    def test_load_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_config(path) == RouterConfig()

    def test_load_yaml_hex_ids(self, tmp_path):
        """Test hex ids in a config file resolve to the written experts."""
        pool = [ExpertId.from_index(i) for i in (9, 99, 3)]
        path = tmp_path / "router.yaml"
        path.write_text(
            yaml.dump({"strategy": "round_robin", "experts": [e.hex() for e in pool]})
        )
        strategy = load_config(path).to_strategy()
        assert strategy.route(Tier.PRO, 0).indices() == [9, 99, 3, 9, 99, 3, 9, 99]

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_load_unsupported(self, tmp_path):
        path = tmp_path / "router.toml"
        path.write_text("strategy = 'gating'")
        with pytest.raises(ValueError, match="Unsupported"):
            load_config(path)

    def test_load_not_mapping(self, tmp_path):
        path = tmp_path / "router.yaml"
        path.write_text("- deterministic\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_save_and_load(self, tmp_path, suffix):
        """Test a saved config builds the same routing."""
        config = RouterConfig(
            strategy="gating", temperature=2.0, gate_weights={3: 0.1, 4: 0.7}
        )
        path = tmp_path / f"router{suffix}"
        save_config(config, path)
        loaded = load_config(path)
        assert loaded.strategy == "gating"
        assert loaded.temperature == 2.0
        assert loaded.weight_map() == config.weight_map()

    def test_save_unsupported(self, tmp_path):
        with pytest.raises(ValueError):
            save_config(RouterConfig(), tmp_path / "router.txt")

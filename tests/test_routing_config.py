import pytest

from safe_walk_routing.config.routing_config import RoutingConfig


def test_default_config_is_valid():
    config = RoutingConfig.create_default_config()
    config.validate()

    assert config.sample_count == 6
    assert config.search_radius_m == 800.0
    assert config.max_entities == 25
    assert config.google_maps_api_key is None


@pytest.mark.parametrize("factory", [RoutingConfig.create_fast_config, RoutingConfig.create_thorough_config])
def test_preset_configs_are_valid(factory):
    factory().validate()


def test_presets_trade_coverage_for_calls():
    assert RoutingConfig.create_fast_config().sample_count < RoutingConfig().sample_count
    assert RoutingConfig.create_thorough_config().sample_count > RoutingConfig().sample_count


@pytest.mark.parametrize("overrides", [
    {"sample_count": 0},
    {"search_radius_m": 0},
    {"score_floor": 60.0, "score_ceiling": 55.0},
    {"police_bonus": -1.0},
    {"aggregation_timeout_s": 0},
    {"max_lookup_workers": 0},
    {"max_alternatives": 0},
])
def test_invalid_config_is_rejected(overrides):
    with pytest.raises(ValueError):
        RoutingConfig(**overrides).validate()


def test_from_env_reads_key_and_timeouts(monkeypatch):
    monkeypatch.setattr("safe_walk_routing.config.routing_config.load_dotenv", lambda: False)
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "AIza-env-key")
    monkeypatch.setenv("ROUTING_REQUEST_TIMEOUT_S", "4.5")
    monkeypatch.setenv("ROUTING_AGGREGATION_TIMEOUT_S", "12")

    config = RoutingConfig.from_env()

    assert config.google_maps_api_key == "AIza-env-key"
    assert config.request_timeout_s == 4.5
    assert config.aggregation_timeout_s == 12.0


def test_from_env_without_key(monkeypatch):
    monkeypatch.setattr("safe_walk_routing.config.routing_config.load_dotenv", lambda: False)
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "")
    monkeypatch.delenv("ROUTING_REQUEST_TIMEOUT_S", raising=False)
    monkeypatch.delenv("ROUTING_AGGREGATION_TIMEOUT_S", raising=False)

    config = RoutingConfig.from_env()

    assert config.google_maps_api_key is None
    assert config.request_timeout_s == RoutingConfig().request_timeout_s

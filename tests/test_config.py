import json
import logging

from calculator import config as config_module
from calculator.config import CalculatorConfig, get_default_config, save_default_config


def test_defaults_match_classic_window():
    config = CalculatorConfig()
    assert config.window_title == "Calculator"
    assert (config.window_width, config.window_height) == (320, 420)
    assert config.resizable is False
    assert config.max_fraction_digits == 10
    assert config.validate() == []

def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = CalculatorConfig(window_title="Calc", max_fraction_digits=4, log_level="DEBUG")
    config.save(str(path))

    assert json.loads(path.read_text())["window_title"] == "Calc"
    assert CalculatorConfig.load(str(path)) == config

def test_from_dict_ignores_unknown_keys():
    config = CalculatorConfig.from_dict({"window_width": 400, "theme": "dark"})
    assert config.window_width == 400
    assert config.window_height == 420

def test_validate_reports_issues():
    config = CalculatorConfig(window_width=0, button_font_size=-1,
                              max_fraction_digits=40, log_level="LOUD")
    issues = config.validate()
    assert len(issues) == 4
    assert any("LOUD" in issue for issue in issues)

def test_get_default_config_missing_file(tmp_path):
    assert get_default_config(tmp_path / "absent.json") == CalculatorConfig()

def test_get_default_config_reads_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"window_title": "Adder", "resizable": True}))
    config = get_default_config(path)
    assert config.window_title == "Adder"
    assert config.resizable is True

def test_get_default_config_falls_back_on_bad_json(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with caplog.at_level(logging.ERROR, logger="calculator.config"):
        assert get_default_config(path) == CalculatorConfig()
    assert "Error loading default config" in caplog.text

def test_get_default_config_falls_back_on_invalid_values(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"window_width": -5}))
    with caplog.at_level(logging.ERROR, logger="calculator.config"):
        assert get_default_config(path) == CalculatorConfig()
    assert "Ignoring invalid config" in caplog.text

def test_save_default_config(tmp_path, monkeypatch):
    path = tmp_path / "calculator_config.json"
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", path)
    config = CalculatorConfig(window_title="Saved", max_fraction_digits=6)
    save_default_config(config)

    assert path.exists()
    assert get_default_config() == config

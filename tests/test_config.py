import logging

from uddf2py import config as config_module
from uddf2py.config import DevelopmentConfig, ProductionConfig, get_config
from uddf2py.utils.validators import is_numeric_string, parse_bool, validate_unit_system


class TestConfig:
    """Test cases for environment-driven configuration."""

    def test_defaults(self):
        """Test values used when nothing is set."""
        app_config = get_config()

        assert isinstance(app_config, DevelopmentConfig)
        assert app_config.DEFAULT_UNIT == 'si'
        assert app_config.LABEL_REFERENCES is False
        assert app_config.log_level == logging.WARNING

    def test_reads_environment(self, monkeypatch):
        """Test that UDDF_* variables are picked up."""
        monkeypatch.setenv('UDDF_DEFAULT_UNIT', ' Metric ')
        monkeypatch.setenv('UDDF_LABEL_REFERENCES', 'true')
        monkeypatch.setenv('UDDF_LOG_LEVEL', 'debug')

        app_config = get_config('production')

        assert isinstance(app_config, ProductionConfig)
        assert app_config.DEFAULT_UNIT == 'metric'
        assert app_config.LABEL_REFERENCES is True
        assert app_config.log_level == logging.DEBUG

    def test_invalid_default_unit_is_stored_as_given(self, monkeypatch):
        """Test that building the config never fails on a bad UDDF_DEFAULT_UNIT."""
        monkeypatch.setenv('UDDF_DEFAULT_UNIT', 'furlongs')
        assert get_config().DEFAULT_UNIT == 'furlongs'

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv('UDDF_LOG_LEVEL', 'chatty')
        assert get_config().log_level == logging.WARNING

    def test_environment_selects_config(self, monkeypatch):
        """Test UDDF_ENV and unknown names."""
        monkeypatch.setenv('UDDF_ENV', 'testing')
        assert isinstance(get_config(), config_module.TestingConfig)
        assert isinstance(get_config('staging'), DevelopmentConfig)

    def test_testing_config_ignores_environment(self, monkeypatch):
        monkeypatch.setenv('UDDF_DEFAULT_UNIT', 'imperial')
        app_config = config_module.TestingConfig()
        assert app_config.DEFAULT_UNIT == 'si'
        assert app_config.TESTING is True


class TestValidators:
    """Test cases for validation helpers."""

    def test_validate_unit_system(self):
        assert validate_unit_system('si') == (True, 'Unit system is valid')
        assert validate_unit_system('imperial')[0] is True
        assert validate_unit_system('')[0] is False
        assert validate_unit_system('SI')[0] is False
        assert validate_unit_system(None) == (False, 'Unit system is required')

    def test_is_numeric_string(self):
        assert is_numeric_string('10')
        assert is_numeric_string('-0.5')
        assert is_numeric_string('.5')
        assert is_numeric_string('2.5E-3')
        assert not is_numeric_string('')
        assert not is_numeric_string('1.2.3')
        assert not is_numeric_string('Infinity')
        assert not is_numeric_string(10)

    def test_parse_bool(self):
        assert parse_bool('TRUE') is True
        assert parse_bool('0') is False
        assert parse_bool(None, default=True) is True

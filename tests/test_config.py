"""Tests for ProbeConfig validation."""

import dataclasses

import pytest

from tcpping_connect.config import (
    ConfigError,
    ProbeConfig,
    validate_count,
    validate_host,
    validate_port,
    validate_timeout,
)


def test_create_with_defaults():
    config = ProbeConfig.create("example.com")
    assert config == ProbeConfig(host="example.com", port=80, count=1, timeout=1.0)


def test_create_coerces_strings():
    config = ProbeConfig.create("example.com", "443", "3", "0.5")
    assert config.port == 443
    assert config.count == 3
    assert config.timeout == 0.5


def test_config_is_immutable():
    config = ProbeConfig.create("example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.port = 22


@pytest.mark.parametrize("port", [0, 65535, "0", "65535"])
def test_validate_port_bounds(port):
    assert validate_port(port) == int(port)


@pytest.mark.parametrize("port", [-1, 65536, 99999, "http", "", None, 1.5, True])
def test_validate_port_rejects(port):
    with pytest.raises(ConfigError):
        validate_port(port)


def test_validate_port_message():
    with pytest.raises(ConfigError, match="Invalid port: '99999'"):
        validate_port("99999")


@pytest.mark.parametrize("count", [0, -3, "0", "many", None])
def test_validate_count_rejects(count):
    with pytest.raises(ConfigError):
        validate_count(count)


def test_validate_count_minimum():
    assert validate_count(1) == 1
    with pytest.raises(ConfigError, match="-x must be >= 1"):
        validate_count(0)


@pytest.mark.parametrize("timeout", [0, -1.0, "0", "abc", "nan", "inf", None, False])
def test_validate_timeout_rejects(timeout):
    with pytest.raises(ConfigError):
        validate_timeout(timeout)


def test_validate_timeout_accepts_fractions():
    assert validate_timeout("0.25") == 0.25
    assert validate_timeout(3) == 3.0


@pytest.mark.parametrize("host", ["", "   ", None])
def test_validate_host_rejects(host):
    with pytest.raises(ConfigError):
        validate_host(host)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


@pytest.mark.parametrize("port", ["8_0", " 80", "80 ", "+80", "٨٠"])
def test_validate_port_rejects_loose_integer_text(port):
    with pytest.raises(ConfigError, match="Invalid port"):
        validate_port(port)


@pytest.mark.parametrize("count", ["1_0", " 3", "+3", "-3"])
def test_validate_count_rejects_loose_integer_text(count):
    with pytest.raises(ConfigError, match="-x must be an integer"):
        validate_count(count)


@pytest.mark.parametrize("timeout", ["1_0", " 1.0", "0.5\n"])
def test_validate_timeout_rejects_loose_number_text(timeout):
    with pytest.raises(ConfigError, match="-w must be a number"):
        validate_timeout(timeout)

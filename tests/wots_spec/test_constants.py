"""Tests for parameter derivation and the configuration presets."""

import pytest
from pydantic import ValidationError

from wots_spec.constants import (
    LARGE_CONFIG,
    PROD_CONFIG,
    TEST_CONFIG,
    WotsConfig,
    derive_parameters,
)
from wots_spec.types.exceptions import InvalidParameterError


@pytest.mark.parametrize(
    "n, w, expected_len_1, expected_len_2",
    [
        (32, 2, 256, 8),
        (32, 4, 128, 7),
        (32, 16, 64, 7),
        (32, 256, 32, 9),
        (64, 2, 512, 9),
        (64, 4, 256, 8),
        (64, 16, 128, 8),
        (64, 256, 64, 10),
    ],
)
def test_derived_lengths(n: int, w: int, expected_len_1: int, expected_len_2: int) -> None:
    """Every supported parameter set derives the known chain counts."""
    params = derive_parameters(n, w)

    assert params.N == n
    assert params.W == w
    assert params.LOG_W == w.bit_length() - 1
    assert params.LEN_1 == expected_len_1
    assert params.LEN_2 == expected_len_2
    assert params.LEN == expected_len_1 + expected_len_2
    assert params.KEY_SIZE == n * (expected_len_1 + expected_len_2)


def test_reference_parameter_set() -> None:
    """n=32, w=4 gives log_w=2, 128 message digits and 7 checksum digits."""
    params = derive_parameters(32, 4)

    assert params.LOG_W == 2
    assert params.LEN_1 == 128
    assert params.LEN_2 == 7
    assert params.LEN == 135
    assert params.KEY_SIZE == 32 * 135


@pytest.mark.parametrize(
    "n, w, parameter",
    [
        pytest.param(16, 4, "n", id="n too small"),
        pytest.param(48, 16, "n", id="n not supported"),
        pytest.param(0, 16, "n", id="n zero"),
        pytest.param(32, 7, "w", id="w not a power of two"),
        pytest.param(64, 12, "w", id="w not a power of two with n=64"),
        pytest.param(16, 7, "w", id="both invalid"),
        pytest.param(32, 0, "w", id="w zero"),
        pytest.param(32, -4, "w", id="w negative"),
        pytest.param(32, 1, "w", id="w of one carries no bits"),
        pytest.param(32, 8, "w", id="log w does not divide 8"),
        pytest.param(32, 512, "w", id="w wider than a byte"),
    ],
)
def test_invalid_parameters_are_rejected(n: int, w: int, parameter: str) -> None:
    """Unsupported parameters raise `InvalidParameterError` naming the culprit."""
    with pytest.raises(InvalidParameterError) as exc_info:
        derive_parameters(n, w)

    assert exc_info.value.parameter == parameter


def test_invalid_n_rejected_regardless_of_w() -> None:
    """n=16 is rejected for every otherwise valid w."""
    for w in (2, 4, 16, 256):
        with pytest.raises(InvalidParameterError, match="has to be 32 or 64"):
            derive_parameters(16, w)


def test_invalid_w_rejected_regardless_of_n() -> None:
    """w=7 is rejected for every otherwise valid n."""
    for n in (32, 64):
        with pytest.raises(InvalidParameterError, match="power of 2"):
            derive_parameters(n, 7)


def test_non_integer_parameters_rejected() -> None:
    """Strict validation refuses booleans, floats and strings."""
    with pytest.raises(ValidationError):
        WotsConfig(N=32, W=True)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        WotsConfig(N=32.0, W=4)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        WotsConfig(N="32", W=4)  # type: ignore[arg-type]


def test_extra_fields_rejected() -> None:
    """There is no stored `keysize` field; the key size is derived."""
    with pytest.raises(ValidationError):
        WotsConfig(N=32, W=4, keysize=0)  # type: ignore[call-arg]


def test_config_is_frozen() -> None:
    """A parameter set cannot be modified after derivation."""
    with pytest.raises(ValidationError):
        TEST_CONFIG.W = 16  # type: ignore[misc]


def test_equal_parameters_compare_and_hash_equal() -> None:
    """Parameter sets are values: equal inputs give interchangeable objects."""
    assert derive_parameters(32, 4) == TEST_CONFIG
    assert hash(derive_parameters(32, 4)) == hash(TEST_CONFIG)
    assert derive_parameters(32, 16) != TEST_CONFIG


def test_presets() -> None:
    """The presets cover both hash functions."""
    assert (TEST_CONFIG.N, TEST_CONFIG.W) == (32, 4)
    assert (PROD_CONFIG.N, PROD_CONFIG.W) == (32, 16)
    assert (LARGE_CONFIG.N, LARGE_CONFIG.W) == (64, 16)
    assert PROD_CONFIG.LEN == 71
    assert LARGE_CONFIG.LEN == 136

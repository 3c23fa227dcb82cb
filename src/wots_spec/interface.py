"""
Defines the core interface for the Winternitz one-time signature scheme.

Implements the high-level functions (`key_gen`, `sign`, `verify`).

This constitutes the public API of the signature scheme.
"""

from __future__ import annotations

import hmac
import logging
from functools import lru_cache
from typing import List, Tuple

from .constants import (
    LARGE_CONFIG,
    PROD_CONFIG,
    TARGET_CONFIG,
    TEST_CONFIG,
    WotsConfig,
)
from .containers import PublicKey, SecretKey, Signature
from .encoding import LARGE_ENCODER, PROD_ENCODER, TEST_ENCODER, WinternitzEncoder
from .hashing import LARGE_CHAIN_HASHER, PROD_CHAIN_HASHER, TEST_CHAIN_HASHER, ChainHasher
from .prf import LARGE_PRF, PROD_PRF, TEST_PRF, Prf
from .types.exceptions import MalformedInputError

logger = logging.getLogger(__name__)


class WinternitzScheme:
    """Instance of the Winternitz one-time signature scheme for a given config."""

    def __init__(
        self,
        config: WotsConfig,
        prf: Prf,
        hasher: ChainHasher,
        encoder: WinternitzEncoder,
    ):
        """Initializes the scheme with a specific parameter set."""
        self.config = config
        self.prf = prf
        self.hasher = hasher
        self.encoder = encoder

    def _message_digits(self, message: bytes) -> List[int]:
        """Hashes the message and encodes the digest into the chain positions `b`."""
        digest = self.hasher.apply(bytes(message))
        return self.encoder.encode(digest)

    def key_gen(self, master_key: bytes) -> Tuple[SecretKey, PublicKey]:
        """
        Generates a key pair from a master key.

        This is a **deterministic** algorithm: all randomness comes from the
        master key, which the caller MUST draw uniformly at random.

        ### Key Generation Algorithm

        1.  **Expand the Master Key**: The PRF derives the secret start of each
            of the `LEN` hash chains from the master key and the chain index.

        2.  **Walk the Chains**: Each secret start is hashed `W - 1` times. The
            chain ends form the public key.

        Args:
            master_key: The `N`-byte master key.

        Returns:
            A tuple containing the `SecretKey` and the `PublicKey`.

        Raises:
            MalformedInputError: If the master key is not exactly `N` bytes.
        """
        # Retrieve the scheme's configuration parameters.
        config = self.config

        sk = self.prf.expand(master_key)

        # Walk every chain to its end.
        chain_ends = [
            self.hasher.hash_chain(start_digest, start_step=0, num_steps=config.W - 1)
            for start_digest in sk.segments(config.N)
        ]
        pk = PublicKey.from_segments(chain_ends)

        logger.debug(
            "Generated key pair with n=%d, w=%d (%d chains)", config.N, config.W, config.LEN
        )
        return sk, pk

    def sign(self, message: bytes, sk: bytes) -> Signature:
        """
        Produces a signature for a message.

        This is a **deterministic** algorithm: signing the same message with the
        same secret key always gives the same signature.

        **CRITICAL SECURITY WARNING**: A secret key must **NEVER** be used to sign
        two different messages. Doing so reveals intermediate chain values and
        allows an attacker to forge signatures. Signing keeps no state, so this
        is not detected here.

        ### Signing Algorithm

        1.  **Message Encoding**: Hash the message to an `N`-byte digest and
            encode it into `LEN` base-w digits (message digits + checksum digits).

        2.  **One-Time Signature**: For each digit `b_i`, reveal the value
            obtained by hashing the secret start of chain `i` exactly `b_i` times.

        Args:
            message: The message to be signed, of any length.
            sk: The secret key to use for signing.

        Returns:
            The resulting `Signature`.

        Raises:
            MalformedInputError: If the secret key does not decode to exactly
                `N * LEN` bytes.
        """
        config = self.config

        # Sizes refer to the decoded bytes, not to the length of a hex string.
        sk = SecretKey(sk)
        if len(sk) != config.KEY_SIZE:
            raise MalformedInputError("secret key", expected=config.KEY_SIZE, actual=len(sk))

        codeword = self._message_digits(message)

        # Sanity check to ensure the encoder returned a codeword of the correct length.
        if len(codeword) != config.LEN:
            raise RuntimeError("Encoding is broken: returned too many or too few digits.")

        secret_starts = sk.segments(config.N)
        ots_hashes = [
            self.hasher.hash_chain(start_digest, start_step=0, num_steps=steps)
            for start_digest, steps in zip(secret_starts, codeword, strict=True)
        ]

        logger.debug("Signed %d-byte message with n=%d, w=%d", len(message), config.N, config.W)
        return Signature.from_segments(ots_hashes)

    def verify(self, message: bytes, pk: bytes, signature: bytes) -> bool:
        r"""
        Verifies a signature against a public key and a message.

        This is a **deterministic** algorithm.

        ### Verification Algorithm

        1.  **Re-encode Message**: Recompute the digits $b = (b_1, \dots, b_{len})$
            from the message exactly as the signer did.

        2.  **Complete the Chains**: Segment $y_i$ of the signature was hashed
            $b_i$ times; hashing it `W - 1 - b_i` more times must give the end
            of chain `i`.

        3.  **Compare**: The signature is valid if and only if every completed
            chain matches the corresponding public key segment.

        Args:
            message: The message that was supposedly signed.
            pk: The public key to verify against.
            signature: The signature to be verified.

        Returns:
            `True` if the signature is valid, `False` otherwise. Keys or
            signatures that do not decode to exactly `N * LEN` bytes are
            invalid, not errors.
        """
        config = self.config

        try:
            pk = PublicKey(pk)
            signature = Signature(signature)
        except (TypeError, ValueError):
            logger.debug("Rejecting signature: public key or signature is not a byte string")
            return False

        # Wrongly sized inputs cannot belong to this parameter set.
        if len(pk) != config.KEY_SIZE or len(signature) != config.KEY_SIZE:
            logger.debug(
                "Rejecting signature: expected %d-byte key and signature, got %d and %d",
                config.KEY_SIZE,
                len(pk),
                len(signature),
            )
            return False

        codeword = self._message_digits(message)

        pk_ends = pk.segments(config.N)
        ots_hashes = signature.segments(config.N)
        for chain_index, (xi, start_digest, expected_end) in enumerate(
            zip(codeword, ots_hashes, pk_ends, strict=True)
        ):
            # Perform the remaining `W - 1 - xi` steps to reach the chain end.
            end_digest = self.hasher.hash_chain(
                start_digest, start_step=0, num_steps=config.W - 1 - xi
            )
            if not hmac.compare_digest(end_digest, expected_end):
                logger.debug("Rejecting signature: chain %d does not match", chain_index)
                return False

        return True


PROD_SIGNATURE_SCHEME = WinternitzScheme(
    PROD_CONFIG,
    PROD_PRF,
    PROD_CHAIN_HASHER,
    PROD_ENCODER,
)
"""An instance configured for production-level parameters."""

TEST_SIGNATURE_SCHEME = WinternitzScheme(
    TEST_CONFIG,
    TEST_PRF,
    TEST_CHAIN_HASHER,
    TEST_ENCODER,
)
"""A lightweight instance for test environments."""

LARGE_SIGNATURE_SCHEME = WinternitzScheme(
    LARGE_CONFIG,
    LARGE_PRF,
    LARGE_CHAIN_HASHER,
    LARGE_ENCODER,
)
"""An instance configured for the SHA-512 parameter set."""

TARGET_SIGNATURE_SCHEME = (
    TEST_SIGNATURE_SCHEME if TARGET_CONFIG == TEST_CONFIG else PROD_SIGNATURE_SCHEME
)
"""The scheme selected by the `WOTS_ENV` environment variable."""


@lru_cache(maxsize=None)
def scheme_for(params: WotsConfig) -> WinternitzScheme:
    """
    Returns the scheme instance for a parameter set.

    Parameter sets are immutable, so one instance per set is built and reused.
    """
    for scheme in (PROD_SIGNATURE_SCHEME, TEST_SIGNATURE_SCHEME, LARGE_SIGNATURE_SCHEME):
        if scheme.config == params:
            return scheme
    return WinternitzScheme(
        params,
        Prf(config=params),
        ChainHasher(config=params),
        WinternitzEncoder(params),
    )


def generate_key_pair(master_key: bytes, params: WotsConfig) -> Tuple[SecretKey, PublicKey]:
    """Generates the `(secret_key, public_key)` pair of `master_key` under `params`."""
    return scheme_for(params).key_gen(master_key)


def sign(message: bytes, secret_key: bytes, params: WotsConfig) -> Signature:
    """
    Signs `message` with `secret_key` under `params`.

    A secret key MUST only ever sign ONE message.
    """
    return scheme_for(params).sign(message, secret_key)


def verify(message: bytes, public_key: bytes, signature: bytes, params: WotsConfig) -> bool:
    """Returns whether `signature` is valid for `message` under `public_key`."""
    return scheme_for(params).verify(message, public_key, signature)

"""
Data containers for the Winternitz one-time signature scheme.

Secret keys, public keys and signatures share one layout: `LEN` segments of
`N` bytes each, concatenated in chain-index order (message digits first, then
checksum digits). The raw bytes are the only wire format the scheme defines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import SegmentedBytes

if TYPE_CHECKING:
    from .interface import WinternitzScheme


class SecretKey(SegmentedBytes):
    """
    The private component of a key pair. **MUST BE KEPT CONFIDENTIAL.**

    Segment `i` is the secret starting point of hash chain `i`, derived from the
    master key by the PRF.

    **Single use**: a secret key MUST sign at most ONE message. Each signature
    reveals intermediate chain values; two signatures on different messages
    reveal enough of them to forge signatures on further messages. Signing is
    stateless, so this cannot be checked here: the caller has to discard the key
    after its first signature.
    """


class PublicKey(SegmentedBytes):
    """
    The public-facing component of a key pair.

    Segment `i` is the end of hash chain `i`: the secret segment hashed
    `W - 1` times. It is safe to distribute and to reuse for any number of
    verifications.
    """


class Signature(SegmentedBytes):
    """
    A signature produced by the `sign` function.

    Segment `i` is the secret segment `i` hashed `b_i` times, where `b_i` is
    digit `i` of the encoded message digest.
    """

    def verify(
        self,
        public_key: bytes,
        message: bytes,
        scheme: "WinternitzScheme",
    ) -> bool:
        """
        Verify the signature.

        This is a convenience method that delegates to `scheme.verify()`.

        Args:
            public_key: The public key to verify against.
            message: The message that was supposedly signed.
            scheme: The scheme instance to use for verification.

        Returns:
            `True` if the signature is valid, `False` otherwise.
        """
        return scheme.verify(message, public_key, self)

import random

import pytest
from hypothesis import example, given, settings
from hypothesis import strategies as st

from reddsa import jubjub, pallas
from reddsa.keys import (
    MalformedSigningKeyError,
    MalformedVerificationKeyError,
    SigningKey,
    VerificationKey,
    VerificationKeyBytes,
)
from reddsa.sigtypes import (
    ORCHARD_BINDING,
    ORCHARD_SPEND_AUTH,
    SAPLING_BINDING,
    SAPLING_SPEND_AUTH,
)

BYTES32 = st.binary(min_size=32, max_size=32)


def test_identity_publickey_passes():
    identity = jubjub.Point.identity()
    assert identity.is_small_order()
    data = identity.to_bytes()
    key = VerificationKey.from_bytes(SAPLING_SPEND_AUTH, VerificationKeyBytes(SAPLING_SPEND_AUTH, data))
    assert bytes(key) == data
    assert key.point == identity


@settings(max_examples=20, deadline=None)
@given(data=BYTES32)
@example(data=bytes(32))
@example(data=(1).to_bytes(32, "little"))
@example(data=(jubjub.SCALAR_FIELD_MODULUS - 1).to_bytes(32, "little"))
@example(data=jubjub.SCALAR_FIELD_MODULUS.to_bytes(32, "little"))
def test_secretkey_serialization(data):
    if int.from_bytes(data, "little") < jubjub.SCALAR_FIELD_MODULUS:
        key = SigningKey.from_bytes(SAPLING_SPEND_AUTH, data)
        assert bytes(key) == data
        again = SigningKey.from_bytes(SAPLING_SPEND_AUTH, bytes(key))
        assert bytes(again.verification_key()) == bytes(key.verification_key())
    else:
        with pytest.raises(MalformedSigningKeyError):
            SigningKey.from_bytes(SAPLING_SPEND_AUTH, data)


@given(data=BYTES32)
def test_publickeybytes_serialization(data):
    key_bytes = VerificationKeyBytes(SAPLING_SPEND_AUTH, data)
    assert key_bytes == VerificationKeyBytes(SAPLING_SPEND_AUTH, bytes(key_bytes))
    assert bytes(key_bytes) == data


@settings(deadline=None)
@given(data=BYTES32)
@example(data=jubjub.Point.identity().to_bytes())
def test_publickey_serialization(data):
    try:
        jubjub.Point.from_bytes(data)
    except ValueError:
        with pytest.raises(MalformedVerificationKeyError):
            VerificationKey.from_bytes(SAPLING_SPEND_AUTH, data)
    else:
        key = VerificationKey.from_bytes(SAPLING_SPEND_AUTH, data)
        assert bytes(key) == data
        assert bytes(key.key_bytes) == data


def test_noncanonical_verification_keys_are_rejected():
    with pytest.raises(MalformedVerificationKeyError):
        VerificationKey.from_bytes(SAPLING_SPEND_AUTH, jubjub.BASE_FIELD_MODULUS.to_bytes(32, "little"))
    with pytest.raises(MalformedVerificationKeyError):
        VerificationKey.from_bytes(ORCHARD_SPEND_AUTH, pallas.BASE_FIELD_MODULUS.to_bytes(32, "little"))


def test_verification_key_bytes_length_is_checked():
    with pytest.raises(ValueError):
        VerificationKeyBytes(SAPLING_SPEND_AUTH, bytes(31))


def test_orchard_signing_key_rejects_unreduced_scalar():
    with pytest.raises(MalformedSigningKeyError):
        SigningKey.from_bytes(ORCHARD_SPEND_AUTH, pallas.SCALAR_FIELD_MODULUS.to_bytes(32, "little"))


@pytest.mark.parametrize("sig_type", [SAPLING_SPEND_AUTH, ORCHARD_BINDING], ids=lambda s: s.name)
def test_verification_key_matches_basepoint_multiple(sig_type):
    key = SigningKey.from_bytes(sig_type, (1).to_bytes(32, "little"))
    assert bytes(key.verification_key()) == sig_type.basepoint_bytes
    decoded = VerificationKey.from_bytes(sig_type, bytes(key.verification_key()))
    assert decoded == key.verification_key()


def test_generate_is_deterministic_for_a_seeded_rng():
    first = SigningKey.generate(SAPLING_BINDING, random.Random(7).randbytes)
    second = SigningKey.generate(SAPLING_BINDING, random.Random(7).randbytes)
    assert bytes(first) == bytes(second)
    assert bytes(first.verification_key()) == bytes(second.verification_key())


@pytest.mark.parametrize("sig_type", [SAPLING_SPEND_AUTH, ORCHARD_SPEND_AUTH], ids=lambda s: s.name)
@pytest.mark.parametrize("seed", [1, 2])
def test_randomization_commutes_with_pubkey_homomorphism(sig_type, seed):
    rng = random.Random(seed)
    r = sig_type.scalar_from_bytes_wide(rng.randbytes(64))
    sk = SigningKey.generate(sig_type, rng.randbytes)
    pk = sk.verification_key()
    via_sk = bytes(sk.randomize(r).verification_key())
    via_pk = bytes(pk.randomize(r))
    assert via_pk == via_sk


@settings(max_examples=5, deadline=None)
@given(seed=st.binary(min_size=32, max_size=32))
def test_randomization_commutes_property(seed):
    rng = random.Random(seed)
    r = jubjub.scalar_from_bytes_wide(rng.randbytes(64))
    sk = SigningKey.generate(SAPLING_SPEND_AUTH, rng.randbytes)
    assert bytes(sk.verification_key().randomize(r)) == bytes(sk.randomize(r).verification_key())


@pytest.mark.parametrize("sig_type", [SAPLING_BINDING, ORCHARD_BINDING], ids=lambda s: s.name)
def test_binding_keys_cannot_be_randomized(sig_type):
    sk = SigningKey.from_bytes(sig_type, (5).to_bytes(32, "little"))
    with pytest.raises(TypeError):
        sk.randomize(3)
    with pytest.raises(TypeError):
        sk.verification_key().randomize(3)
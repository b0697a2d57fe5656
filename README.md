# reddsa

Building blocks for RedDSA as used in Sapling (over the Jubjub curve) and
Orchard (over the Pallas curve), in pure Python with no third-party
dependencies:

- the Jubjub and Pallas group arithmetic and scalar encodings;
- variable-time multiscalar multiplication over width-5 non-adjacent forms;
- the four RedDSA signature types (basepoints and hash personalisations);
- signing keys and verification keys: generation, parsing with canonical
  encoding checks, serialisation and randomisation;
- the 64-byte signature encoding (`R || s`).

None of this code is constant-time. Use it for public data, experiments and
tests, not for secrets in production.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Signature types

`reddsa.sigtypes` defines the `SigType` dataclass and four instances:

- `SAPLING_SPEND_AUTH` and `SAPLING_BINDING` (Jubjub, personalisation
  `Zcash_RedJubjubH`);
- `ORCHARD_SPEND_AUTH` and `ORCHARD_BINDING` (Pallas, personalisation
  `Zcash_RedPallasH`).

`ALL_SIG_TYPES` holds all four. `SigType.basepoint()` returns the decoded
generator for that type, and the `spend_auth` field says whether keys of that
type may be randomised.

## Keys

```python
import os

from reddsa.keys import SigningKey, VerificationKey
from reddsa.sigtypes import SAPLING_SPEND_AUTH

sk = SigningKey.generate(SAPLING_SPEND_AUTH, os.urandom)  # rng: n -> n random bytes
vk = sk.verification_key()

sk_bytes = bytes(sk)      # 32-byte little-endian scalar
vk_bytes = bytes(vk)      # 32-byte point encoding

sk2 = SigningKey.from_bytes(SAPLING_SPEND_AUTH, sk_bytes)
vk2 = VerificationKey.from_bytes(SAPLING_SPEND_AUTH, vk_bytes)
assert bytes(sk2.verification_key()) == vk_bytes
```

`SigningKey.generate` draws 64 bytes from the given callable (`os.urandom` if
none is given) and reduces them modulo the group order.
`VerificationKey.from_scalar(sig_type, scalar)` computes the key for a secret
scalar directly. `VerificationKeyBytes` holds an unchecked 32-byte encoding.

Errors derive from `reddsa.keys.RedDSAError`:

- `MalformedSigningKeyError`: the 32 bytes are not a canonical scalar.
- `MalformedVerificationKeyError`: the 32 bytes are not a valid point encoding.

Inputs of the wrong length raise `ValueError`. Small-order verification keys,
the identity included, are accepted.

### Randomisation

Spend-authorisation keys can be randomised with a scalar; randomising a
signing key and its verification key with the same scalar gives matching keys:

```python
r = 12345
assert bytes(sk.randomize(r).verification_key()) == bytes(vk.randomize(r))
```

Randomising a binding key raises `TypeError`.

## Signatures

`reddsa.signature.Signature(sig_type, r_bytes, s_bytes)` holds the two 32-byte
halves. `Signature.from_bytes(sig_type, data)` splits 64 bytes, and
`bytes(signature)` joins them again.

## Curve arithmetic

`reddsa.jubjub` and `reddsa.pallas` each provide a `Point` class with
`identity()`, `from_bytes()`, `to_bytes()`, `double()`, `is_small_order()`,
`+`, `-`, negation, multiplication by an integer scalar and equality
(`jubjub.Point` also has `from_affine(u, v)`), plus the scalar helpers
`scalar_from_bytes`, `scalar_to_bytes` and `scalar_from_bytes_wide`.
Non-canonical encodings raise `ValueError`.

`reddsa.scalar_mul` provides:

- `non_adjacent_form(scalar_bytes, w, naf_length)`: the width-`w` NAF of a
  32-byte little-endian scalar;
- `LookupTable5`: the odd multiples `A, 3A, ..., 15A` of a point;
- `Curve` descriptions `JUBJUB` (NAF length 253) and `PALLAS` (255);
- `optional_multiscalar_mul(curve, scalars, points)`, which returns `None` if
  any point is `None`, and `vartime_multiscalar_mul(curve, scalars, points)`,
  which requires equal lengths.

## What this package does not do

It does not create or verify signatures: there is no `sign` method on
`SigningKey` and no `verify` method on `VerificationKey`, since the
personalised challenge hash is not included. It has no batch verification, no
threshold (FROST) signing, and no command-line tool.
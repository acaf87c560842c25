from __future__ import annotations

import base64
import hashlib
import json
import random

import pytest

from liqpay_client import (
    DecodeError,
    HashAlgorithm,
    SerializationError,
    build_form_data,
    contract_for,
    decode_payload,
    encode_payload,
    sign,
    verify_signature,
)
from liqpay_client.core.signing import serialize_request
from liqpay_client.schemas import (
    Currency,
    SendReceiptRequest,
    StatusRequest,
    TokenPaymentRequest,
)

from conftest import OrderRequest


def _b64(digest: bytes) -> str:
    return base64.b64encode(digest).decode("ascii")


def test_legacy_request_signs_with_sha1():
    algorithm = contract_for(TokenPaymentRequest).algorithm

    assert algorithm is HashAlgorithm.SHA1
    assert sign("secret", "body", algorithm) == _b64(
        hashlib.sha1(b"secretbodysecret").digest()
    )


def test_current_request_signs_with_sha3_256():
    algorithm = contract_for(StatusRequest).algorithm

    assert algorithm is HashAlgorithm.SHA3_256
    assert sign("secret", "body", algorithm) == _b64(
        hashlib.sha3_256(b"secretbodysecret").digest()
    )


def test_signature_is_deterministic():
    for algorithm in HashAlgorithm:
        assert sign("key", "payload", algorithm) == sign("key", "payload", algorithm)


def test_signature_changes_with_any_single_character():
    rng = random.Random(1234)
    alphabet = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789+/="

    for _ in range(200):
        key = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 24)))
        payload = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 64)))
        algorithm = rng.choice(list(HashAlgorithm))
        original = sign(key, payload, algorithm)

        index = rng.randrange(len(payload))
        replacement = alphabet[(alphabet.index(payload[index]) + 1) % len(alphabet)]
        mutated_payload = payload[:index] + replacement + payload[index + 1:]
        assert sign(key, mutated_payload, algorithm) != original

        index = rng.randrange(len(key))
        replacement = alphabet[(alphabet.index(key[index]) + 1) % len(alphabet)]
        mutated_key = key[:index] + replacement + key[index + 1:]
        assert sign(mutated_key, payload, algorithm) != original


def test_signature_has_no_trailing_whitespace():
    signature = sign("secret", "body", HashAlgorithm.SHA3_256)

    assert signature == signature.strip()
    assert "\n" not in signature


def test_payload_round_trips_through_base64():
    request = OrderRequest(order_id="Замовлення-1", amount=10.5)

    payload = encode_payload(request)

    assert base64.b64decode(payload).decode("utf-8") == serialize_request(request)
    assert decode_payload(payload) == {"order_id": "Замовлення-1", "amount": 10.5}


def test_serialization_is_compact_and_ordered():
    request = OrderRequest(order_id="A1", amount=10.0)

    assert serialize_request(request) == '{"order_id":"A1","amount":10.0}'


def test_unset_optional_fields_are_omitted_not_null():
    request = SendReceiptRequest(
        public_key="pub", email="buyer@example.com", order_id="A1"
    )

    text = serialize_request(request)

    assert json.loads(text) == {
        "version": "7",
        "public_key": "pub",
        "action": "ticket",
        "email": "buyer@example.com",
        "order_id": "A1",
    }
    assert "null" not in text
    assert "payment_id" not in text
    assert "language" not in text


def test_setting_an_optional_field_changes_the_signature():
    bare = SendReceiptRequest(public_key="pub", email="a@example.com", order_id="A1")
    with_payment = SendReceiptRequest(
        public_key="pub", email="a@example.com", order_id="A1", payment_id="42"
    )

    assert build_form_data("secret", bare)["signature"] != (
        build_form_data("secret", with_payment)["signature"]
    )


def test_non_finite_amount_is_a_serialization_error():
    request = TokenPaymentRequest(
        public_key="pub",
        amount=float("nan"),
        card_token="tok",
        currency=Currency.UAH,
        order_id="A1",
        description="nan",
    )

    with pytest.raises(SerializationError):
        encode_payload(request)


def test_form_data_uses_bound_algorithm():
    request = OrderRequest(order_id="A1", amount=10.0)

    form = build_form_data("secret", request)

    assert list(form) == ["data", "signature"]
    assert form["data"] == _b64(b'{"order_id":"A1","amount":10.0}')
    expected = hashlib.sha3_256(f"secret{form['data']}secret".encode()).digest()
    assert form["signature"] == _b64(expected)


def test_verify_signature_accepts_only_matching_signature():
    payload = encode_payload(OrderRequest(order_id="A1", amount=1.0))
    signature = sign("secret", payload, HashAlgorithm.SHA3_256)

    assert verify_signature("secret", payload, signature, HashAlgorithm.SHA3_256)
    assert not verify_signature("other", payload, signature, HashAlgorithm.SHA3_256)
    assert not verify_signature("secret", payload, signature, HashAlgorithm.SHA1)


def test_decode_payload_rejects_garbage():
    with pytest.raises(DecodeError):
        decode_payload("not base64!")

    with pytest.raises(DecodeError):
        decode_payload(base64.b64encode(b"[1, 2]").decode("ascii"))

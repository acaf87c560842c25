from __future__ import annotations

import base64
import json

import pytest
from pydantic import ValidationError

from liqpay_client import decode_payload, encode_payload
from liqpay_client.core.signing import serialize_request
from liqpay_client.schemas import (
    Action,
    ArchiveRequest,
    ArchiveResponse,
    BrowserColorDepth,
    CardPaymentRequest,
    CardTokenAction,
    ChangeTokenStatusRequest,
    ChangeTokenStatusResponse,
    CompensationReportFileStatusResponse,
    CompensationReportRequest,
    CreateTokenRequest,
    Currency,
    DetailAddenda,
    DigitalWallet,
    FundsBlockingRequest,
    InvoiceUnitsRequest,
    Language,
    MccCodesResponse,
    MpiEci,
    MpiRequest,
    MpiResponse,
    MpiStatus,
    OtpRequest,
    P2PCompensationReportFileRequest,
    P2PCreditRequest,
    P2PReportType,
    PaymentCompletionRequest,
    PayType,
    RegistryResponse,
    Result,
    RroInfo,
    RroItem,
    SendInvoiceRequest,
    Status,
    StatusRequest,
    StatusResponse,
    SubscribePeriodicity,
    SubscribeRequest,
    ThreeDsInfo,
    Version,
)


def _card_payment(**options) -> CardPaymentRequest:
    return CardPaymentRequest(
        public_key="pub",
        amount=100.0,
        card="4242424242424242",
        card_exp_month="03",
        card_exp_year="29",
        currency=Currency.UAH,
        order_id="order-1",
        description="Ticket",
        **options,
    )


def test_card_payment_uses_wire_names():
    request = _card_payment(
        card_cvv="123",
        pay_type=PayType.APPLE_PAY,
        ds_trans_id="ds-1",
        recurring_by_token="1",
    )

    values = json.loads(serialize_request(request))

    assert values["version"] == "7"
    assert values["action"] == "pay"
    assert values["currency"] == "UAH"
    assert values["paytype"] == "apay"
    assert values["dsTransID"] == "ds-1"
    assert values["recurringbytoken"] == "1"
    assert "pay_type" not in values
    assert "sender_email" not in values


def test_card_details_are_hidden_from_repr():
    request = _card_payment(card_cvv="987")

    text = repr(request)

    assert "4242424242424242" not in text
    assert "987" not in text


def test_unknown_request_fields_are_rejected():
    with pytest.raises(ValidationError):
        _card_payment(cardholder="nobody")


def test_detail_addenda_is_base64_json():
    addenda = DetailAddenda(airline="PS", flight_number="PS101", departure_date=150124)

    request = _card_payment(detail_addenda=addenda.to_base64())

    dae = json.loads(base64.b64decode(decode_payload(encode_payload(request))["dae"]))
    assert dae == {"airLine": "PS", "flightNumber": "PS101", "departureDate": 150124}


def test_nested_receipt_info_omits_unset_fields():
    request = _card_payment(rro_info=RroInfo(items=[RroItem(id=1, amount=2, cost=100.0, price=50.0)]))

    values = json.loads(serialize_request(request))

    assert values["rro_info"] == {"items": [{"id": 1, "amount": 2, "cost": 100.0, "price": 50.0}]}


def test_invoice_units_constructors_pick_action():
    full = InvoiceUnitsRequest.full(public_key="pub", hide_language_name=True)
    by_language = InvoiceUnitsRequest.by_language(Language.UK, public_key="pub")

    assert json.loads(serialize_request(full)) == {
        "version": "3",
        "public_key": "pub",
        "action": "invoice_units_get_list",
        "hide_name_lang": True,
    }
    assert json.loads(serialize_request(by_language))["action"] == (
        Action.GET_INVOICE_UNITS_BY_LANGUAGE.value
    )
    assert json.loads(serialize_request(by_language))["language"] == "uk"


def test_archive_request_always_sends_format():
    request = ArchiveRequest(public_key="pub", date_from="1700000000000", date_to="1700086400000")

    assert json.loads(serialize_request(request))["resp_format"] == "json"


def test_otp_token_is_renamed():
    request = OtpRequest(public_key="pub", otp="1234", token="confirm-token")

    values = json.loads(serialize_request(request))

    assert values["confirm_token"] == "confirm-token"
    assert "1234" not in repr(request)


def test_token_status_change_serializes_enum_value():
    request = ChangeTokenStatusRequest(
        public_key="pub", card_token="tok", card_token_action=CardTokenAction.SUSPEND
    )

    assert json.loads(serialize_request(request))["card_token_action"] == "SUSPEND"


def test_status_response_decodes_renamed_and_loose_fields():
    response = StatusResponse.model_validate_json(
        json.dumps(
            {
                "result": "ok",
                "status": "success",
                "acq_id": 414963,
                "action": "pay",
                "amount": 100,
                "authcode_debit": 88204,
                "bonus_procent": 1.5,
                "create_date": 1700000000000,
                "currency": "UAH",
                "mpi_eci": 7,
                "paytype": "card",
                "rrn_debit": "000111222",
                "sender_card_mask2": "424242*42",
                "type": "buy",
                "version": 3,
                "err_code": None,
                "unexpected_field": "ignored",
            }
        )
    )

    assert response.acquirer_id == 414963
    assert response.action is Action.PAY
    assert response.amount == 100.0
    assert response.authcode_debit == "88204"
    assert response.bonus_percent == 1.5
    assert response.creation_date == 1700000000000
    assert response.mpi_eci is MpiEci.WITHOUT_3DS
    assert response.pay_type is PayType.CARD
    assert response.retrieval_reference_number_debit == "000111222"
    assert response.sender_card_mask == "424242*42"
    assert response.operation_type == "buy"
    assert response.version == 3
    assert response.error_code is None
    assert "sender_phone" not in response.model_fields_set


def test_status_values_have_no_padding():
    response = StatusResponse.model_validate_json('{"result":"ok","status":"3ds_verify"}')

    assert response.status is Status.VERIFY_3DS


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        StatusResponse.model_validate_json('{"result":"ok","status":"teleported"}')


def test_archive_response_accepts_success_result():
    response = ArchiveResponse.model_validate_json(
        '{"result":"success","data":[{"status":"success","order_id":"A1","amount":5}]}'
    )

    assert response.result is Result.SUCCESS
    assert response.data[0].order_id == "A1"
    assert response.data[0].result is None


def test_nested_reference_data_decodes():
    codes = MccCodesResponse.model_validate_json(
        '{"result":"ok","status":"success","mcc_codes":[{"id":1,"mcc_code":5411,"name":"Grocery"}]}'
    )
    token = ChangeTokenStatusResponse.model_validate_json(
        '{"result":"ok","card_token":"tok","card_token_info":'
        '{"tokenSuffix":"4242","status":"SUSPENDED","decision":"APPROVED"}}'
    )

    assert codes.mcc_codes[0].mcc_code == 5411
    assert codes.mcc_codes[0].parent_id is None
    assert token.card_token_info.token_suffix == "4242"
    assert token.status is None


def test_status_request_cannot_be_retargeted():
    with pytest.raises(ValidationError):
        StatusRequest(public_key="pub", order_id="A1", version=Version.THREE, action=Action.PAY)

    request = StatusRequest(public_key="pub", order_id="A1", version=Version.SEVEN)
    values = json.loads(serialize_request(request))
    assert (values["version"], values["action"]) == ("7", "status")


def test_public_key_is_omitted_until_configured():
    values = json.loads(serialize_request(StatusRequest(order_id="A1")))

    assert values == {"version": "7", "action": "status", "order_id": "A1"}


def test_subscribe_request_serializes_schedule():
    request = SubscribeRequest(
        public_key="pub",
        amount=99.0,
        card="4242424242424242",
        card_exp_month="03",
        card_exp_year="29",
        currency=Currency.USD,
        order_id="sub-1",
        description="Monthly plan",
        subscribe_date_start="2024-01-01 00:00:00",
        subscribe_periodicity=SubscribePeriodicity.MONTH,
    )

    values = json.loads(serialize_request(request))

    assert values["action"] == "subscribe"
    assert values["subscribe_periodicity"] == "month"
    assert "sender_address" not in values
    assert "4242424242424242" not in repr(request)


def test_send_invoice_limits_payment_action():
    request = SendInvoiceRequest(
        public_key="pub",
        amount=250.0,
        currency=Currency.UAH,
        order_id="inv-1",
        email="client@example.com",
        action_payment=Action.HOLD,
        expiration_date="2024-02-01 00:00:00",
    )

    values = json.loads(serialize_request(request))

    assert values["action"] == "invoice_send"
    assert values["action_payment"] == "hold"
    assert values["expired_date"] == "2024-02-01 00:00:00"

    with pytest.raises(ValidationError):
        SendInvoiceRequest(
            amount=1.0,
            currency=Currency.UAH,
            order_id="inv-2",
            email="client@example.com",
            action_payment=Action.REFUND,
        )


def test_unique_token_keeps_card_details():
    request = CreateTokenRequest.from_card(
        "4242424242424242", "123", "03", "29", is_debit=False, public_key="pub"
    )

    unique = request.unique("2024-12-31 00:00:00")
    values = json.loads(serialize_request(unique))

    assert json.loads(serialize_request(request))["action"] == "token_create"
    assert values["action"] == "token_create_unique"
    assert values["expired_date"] == "2024-12-31 00:00:00"
    assert values["card"] == "4242424242424242"
    assert (values["is_debit"], values["is_credit"]) == (False, True)
    assert "123" not in repr(unique)


def test_token_connect_uses_camel_case_wire_name():
    request = CreateTokenRequest.for_token_connect("receipt-1", public_key="pub")

    values = json.loads(serialize_request(request))

    assert values["pushAccountReceipt"] == "receipt-1"
    assert values["is_debit"] is True


def test_funds_blocking_from_wallet_encodes_token():
    request = FundsBlockingRequest.from_wallet(
        DigitalWallet.GOOGLE_PAY,
        '{"signature":"sig"}',
        amount=10.0,
        currency=Currency.UAH,
        order_id="hold-1",
        description="Reservation",
    )

    values = json.loads(serialize_request(request))

    assert values["action"] == "hold"
    assert values["paytype"] == "gpay"
    assert base64.b64decode(values["gpay_token"]) == b'{"signature":"sig"}'
    assert "applepay_token" not in values


def test_payment_completion_captures_reserved_funds():
    request = PaymentCompletionRequest(public_key="pub", amount=7.5, order_id="hold-1")

    assert json.loads(serialize_request(request)) == {
        "version": "7",
        "public_key": "pub",
        "action": "hold_completion",
        "amount": 7.5,
        "order_id": "hold-1",
    }


def test_p2p_credit_to_account_sets_receiver():
    request = P2PCreditRequest.to_account(
        "UA213223130000026007233566001",
        "322313",
        "12345678",
        "ACME LLC",
        amount=1000.0,
        currency=Currency.UAH,
        order_id="pay-out-1",
        description="Salary",
    )

    values = json.loads(serialize_request(request))

    assert values["action"] == "p2pcredit"
    assert values["receiver_company"] == "ACME LLC"
    assert "receiver_card" not in values


def test_mpi_request_nests_browser_details_by_wire_name():
    info = ThreeDsInfo(
        notification_url="https://shop.example/3ds",
        browser_language="uk-UA",
        three_ds_requestor_url="https://shop.example",
        browser_screen_height="1080",
        browser_screen_width="1920",
        browser_color_depth=BrowserColorDepth.TWENTY_FOUR,
        browser_accept_header="text/html",
        browser_tz=ThreeDsInfo.utc_offset_minutes(2),
        browser_user_agent="Mozilla/5.0",
    )
    request = MpiRequest(
        public_key="pub",
        amount=5.0,
        card="4242424242424242",
        card_exp_month="03",
        card_exp_year="29",
        currency=Currency.EUR,
        order_id="mpi-1",
        description="3DS check",
        action_payment=Action.PAY,
        three_ds_info=info,
    )

    values = json.loads(serialize_request(request))

    assert values["action"] == "mpi"
    assert values["threeDSInfo"]["browserColorDepth"] == "24"
    assert values["threeDSInfo"]["browserTZ"] == -120
    assert "browserJavaEnabled" not in values["threeDSInfo"]


def test_mpi_response_decodes_without_result():
    response = MpiResponse.model_validate_json(
        '{"status":"3ds_verify","mpi_status":"C","mpi_req_url":"https://acs.example"}'
    )

    assert response.result is None
    assert response.status is Status.VERIFY_3DS
    assert response.mpi_status is MpiStatus.C


def test_compensation_report_needs_one_selector():
    by_date = CompensationReportRequest.by_date("2024-01-15", public_key="pub")

    values = json.loads(serialize_request(by_date))
    assert values["action"] == "reports_compensation"
    assert values["resp_format"] == "json"
    assert "compensation_id" not in values

    with pytest.raises(ValidationError):
        CompensationReportRequest(public_key="pub")
    with pytest.raises(ValidationError):
        CompensationReportRequest(public_key="pub", compensation_id="c-1", date="2024-01-15")


def test_p2p_report_file_serializes_type():
    request = P2PCompensationReportFileRequest(
        public_key="pub", operation_type=P2PReportType.P2P_CREDIT, date="2024-01-15"
    )

    values = json.loads(serialize_request(request))

    assert values["type"] == "p2pcredit"
    assert values["response_format"] == "csv"


def test_report_responses_decode_renamed_fields():
    registry = RegistryResponse.model_validate_json(
        '{"result":"success","data":[{"id":7,"create_date":"2024-01-15 10:00:00",'
        '"trans_amount":12.5,"trans_currency":"UAH","channel":"checkoutjs"}]}'
    )
    file_status = CompensationReportFileStatusResponse.model_validate_json(
        '{"result":"success","status":"success","filelink":"https://files.example/r.csv"}'
    )

    entry = registry.data[0]
    assert entry.transaction_amount == 12.5
    assert entry.transaction_currency is Currency.UAH
    assert entry.channel.value == "checkoutjs"
    assert file_status.file_link == "https://files.example/r.csv"

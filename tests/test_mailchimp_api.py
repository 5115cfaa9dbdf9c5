from datetime import datetime, timedelta, timezone

import pytest
import requests
from beartype.roar import BeartypeCallHintParamViolation
from loguru import logger

from mailchimp_python_api import (
    APIError,
    AuthenticationError,
    EncodeError,
    ErrorDecodeError,
    MailchimpAPI,
    ResponseDecodeError,
    datacenter_from_key,
    datatypes,
    resolve_endpoint,
)

from conftest import API_KEY, ENDPOINT, make_response, sent_json, sent_request

# --- Endpoint Resolution ---


@pytest.mark.parametrize(
    "api_key, datacenter",
    [
        ("0123456789abcdef-us6", "us6"),
        ("abc-us21", "us21"),
        ("a-b-c-us3", "us3"),
        ("0123456789abcdef0123456789abcdef-eu1", "eu1"),
    ],
)
def test_datacenter_from_key(api_key, datacenter):
    assert datacenter_from_key(api_key) == datacenter
    assert resolve_endpoint(api_key) == f"https://{datacenter}.api.mailchimp.com/3.0"


def test_malformed_key_yields_empty_datacenter():
    """The key is not validated locally; the server rejects it later."""
    assert datacenter_from_key("abc-") == ""
    assert resolve_endpoint("abc-") == "https://.api.mailchimp.com/3.0"


def test_client_endpoint_fixed_at_construction(api, session):
    assert api.endpoint == ENDPOINT
    api.get_lists()
    api.get_campaigns()
    urls = [c.kwargs["url"] for c in session.request.call_args_list]
    assert urls == [f"{ENDPOINT}/lists", f"{ENDPOINT}/campaigns"]


# --- Configuration ---


def test_api_key_from_environment(monkeypatch, session):
    monkeypatch.setenv("MAILCHIMP_PYTHON_API_KEY", "fromenv-us2")
    api = MailchimpAPI(session=session)
    assert api.api_key == "fromenv-us2"
    assert api.endpoint == "https://us2.api.mailchimp.com/3.0"


def test_argument_takes_precedence_over_environment(monkeypatch, session):
    monkeypatch.setenv("MAILCHIMP_PYTHON_API_KEY", "fromenv-us2")
    api = MailchimpAPI(api_key="fromarg-us9", session=session)
    assert api.endpoint == "https://us9.api.mailchimp.com/3.0"


def test_missing_api_key_raises(session):
    with pytest.raises(ValueError, match="API Key is required"):
        MailchimpAPI(session=session)


def test_debug_from_environment(monkeypatch, session):
    monkeypatch.setenv("MAILCHIMP_PYTHON_API_DEBUG", "true")
    assert MailchimpAPI(api_key=API_KEY, session=session).debug is True
    assert MailchimpAPI(api_key=API_KEY, session=session, debug=False).debug is False


def test_timeout_configuration(monkeypatch, session):
    assert MailchimpAPI(api_key=API_KEY, session=session).timeout == 60.0
    assert MailchimpAPI(api_key=API_KEY, session=session, timeout=5).timeout == 5.0

    monkeypatch.setenv("MAILCHIMP_PYTHON_API_TIMEOUT", "12.5")
    assert MailchimpAPI(api_key=API_KEY, session=session).timeout == 12.5

    monkeypatch.setenv("MAILCHIMP_PYTHON_API_TIMEOUT", "soon")
    assert MailchimpAPI(api_key=API_KEY, session=session).timeout == 60.0


def test_construction_makes_no_request(session):
    MailchimpAPI(api_key=API_KEY, session=session)
    session.request.assert_not_called()


def test_without_session_each_call_uses_requests_request(monkeypatch):
    calls = []

    def fake_request(**kwargs):
        calls.append(kwargs)
        return make_response(200, {"account_name": "Acme"})

    monkeypatch.setattr(requests, "request", fake_request)
    api = MailchimpAPI(api_key=API_KEY)
    assert api.session is None
    assert api.get_root().account_name == "Acme"
    assert api.get_root().account_name == "Acme"

    assert len(calls) == 2
    assert calls[0]["url"] == f"{ENDPOINT}/"
    assert calls[0]["auth"] == ("mailchimp_python_api", API_KEY)


def test_configuration_is_read_only(api):
    with pytest.raises(AttributeError):
        api.endpoint = "https://example.com"
    with pytest.raises(AttributeError):
        api.api_key = "other-us1"


# --- Request Pipeline ---


def test_request_carries_auth_and_json_headers(api, session):
    api.get_root()
    kwargs = sent_request(session)
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == f"{ENDPOINT}/"
    assert kwargs["auth"] == ("mailchimp_python_api", API_KEY)
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["data"] is None
    assert kwargs["params"] is None


def test_custom_user_is_sent(session):
    api = MailchimpAPI(api_key=API_KEY, session=session, user="reporting")
    api.get_root()
    assert sent_request(session)["auth"] == ("reporting", API_KEY)


def test_empty_query_values_are_dropped(api, session):
    params = datatypes.CampaignQueryParams(status="sent", count=10, list_id="")
    api.get_campaigns(params)

    kwargs = sent_request(session)
    assert kwargs["params"] == {"status": "sent", "count": "10"}

    prepared = requests.Request("GET", kwargs["url"], params=kwargs["params"]).prepare()
    assert prepared.url == f"{ENDPOINT}/campaigns?status=sent&count=10"


def test_body_is_json_encoded_without_none_fields(api, session):
    session.request.return_value = make_response(200, {"id": "L1", "name": "News"})
    body = datatypes.ListCreationRequest(name="News", permission_reminder="You signed up")
    created = api.create_list(body)

    sent = sent_json(session)
    assert sent_request(session)["method"] == "POST"
    assert sent["name"] == "News"
    assert sent["permission_reminder"] == "You signed up"
    assert sent["contact"]["company"] == ""
    assert "visibility" not in sent
    assert created.list_id == "L1"
    assert created.name == "News"


def test_unencodable_body_fails_before_sending(api, session):
    with pytest.raises(EncodeError):
        api._call("POST", "/batches", body={"operations": object()})
    session.request.assert_not_called()


def test_nan_and_infinity_are_not_sent(api, session):
    with pytest.raises(EncodeError):
        api._call("POST", "/batches", body={"x": float("nan")})
    location = datatypes.MemberLocation(latitude=float("inf"))
    with pytest.raises(EncodeError):
        api.list_handle("L1").create_member(datatypes.MemberRequest(location=location))
    session.request.assert_not_called()


def test_per_call_timeout_is_forwarded(api, session):
    api.get_root()
    assert sent_request(session)["timeout"] == 60.0
    api.get_root(timeout=2.5)
    assert sent_request(session)["timeout"] == 2.5


def test_transport_errors_propagate_unmodified(api, session):
    session.request.side_effect = requests.exceptions.ConnectTimeout("too slow")
    with pytest.raises(requests.exceptions.ConnectTimeout, match="too slow"):
        api.get_root(timeout=0.01)
    assert session.request.call_count == 1, "Calls are never retried"


def test_no_content_without_model_returns_none(api, session):
    session.request.return_value = make_response(204)
    assert api._call("POST", "/campaigns/c1/actions/unschedule") is None


def test_empty_body_with_model_returns_default_instance(api, session):
    session.request.return_value = make_response(200, content=b"")
    root = api.get_root()
    assert isinstance(root, datatypes.RootResponse)
    assert root.account_id == ""


def test_response_is_decoded_into_model(api, session):
    session.request.return_value = make_response(
        200,
        {
            "account_id": "acc1",
            "account_name": "Acme",
            "total_subscribers": 42,
            "contact": {"company": "Acme Inc", "city": "Atlanta"},
            "_links": [{"rel": "self", "href": f"{ENDPOINT}/", "method": "GET"}],
        },
    )
    root = api.get_root()
    assert root.account_name == "Acme"
    assert root.total_subscribers == 42
    assert root.contact.city == "Atlanta"
    assert root.links[0].rel == "self"


def test_invalid_success_body_raises_decode_error(api, session):
    session.request.return_value = make_response(200, content=b"not json")
    with pytest.raises(ResponseDecodeError) as exc_info:
        api.get_root()
    assert exc_info.value.status_code == 200

    session.request.return_value = make_response(200, {"total_subscribers": "many"})
    with pytest.raises(ResponseDecodeError):
        api.get_root()


# --- Error Decoding ---


def test_not_found_is_decoded(api, session):
    session.request.return_value = make_response(
        404,
        {
            "type": "https://mailchimp.com/developer/marketing/docs/errors/",
            "title": "Resource Not Found",
            "status": 404,
            "detail": "The requested resource could not be found.",
            "instance": "995c5cb0-3280-4a6e-808b-3b096d0bb219",
        },
    )
    with pytest.raises(APIError) as exc_info:
        api.get_list("missing")
    error = exc_info.value
    assert error.status == 404
    assert error.title == "Resource Not Found"
    assert error.detail == "The requested resource could not be found."
    assert error.instance == "995c5cb0-3280-4a6e-808b-3b096d0bb219"
    assert str(error) == (
        "Error 404 Resource Not Found (The requested resource could not be found.)"
    )


def test_boolean_wrapper_raises_the_same_error(api, session):
    session.request.return_value = make_response(
        404, {"status": 404, "title": "Not Found", "detail": "..."}
    )
    with pytest.raises(APIError) as exc_info:
        api.delete_campaign("missing")
    assert exc_info.value.status == 404
    assert exc_info.value.detail == "..."


def test_boolean_wrapper_returns_true_on_no_content(api, session):
    session.request.return_value = make_response(204)
    assert api.delete_campaign("c1") is True
    assert sent_request(session)["method"] == "DELETE"
    assert sent_request(session)["url"] == f"{ENDPOINT}/campaigns/c1"


def test_field_errors_are_kept(api, session):
    session.request.return_value = make_response(
        400,
        {
            "status": 400,
            "title": "Invalid Resource",
            "detail": "The resource submitted could not be validated.",
            "errors": [{"field": "email_address", "message": "This value should not be blank."}],
        },
    )
    with pytest.raises(APIError) as exc_info:
        api.list_handle("L1").create_member(datatypes.MemberRequest())
    assert exc_info.value.errors[0]["field"] == "email_address"


def test_unauthorized_raises_authentication_error(api, session):
    session.request.return_value = make_response(
        401,
        {"status": 401, "title": "API Key Invalid", "detail": "Your API key may be invalid."},
    )
    with pytest.raises(AuthenticationError) as exc_info:
        api.get_root()
    assert isinstance(exc_info.value, APIError)
    assert exc_info.value.status == 401


def test_undecodable_error_body_keeps_http_status(api, session):
    session.request.return_value = make_response(
        502, content=b"<html><body>Bad Gateway</body></html>"
    )
    with pytest.raises(ErrorDecodeError) as exc_info:
        api.get_root()
    assert exc_info.value.status_code == 502
    assert "Bad Gateway" in exc_info.value.body


def test_error_body_without_status_uses_http_status(api, session):
    session.request.return_value = make_response(503, {"title": "Unavailable"})
    with pytest.raises(APIError) as exc_info:
        api.get_root()
    assert exc_info.value.status == 503


# --- Debug Logging ---


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(messages.append, level="TRACE", format="{message}")
    yield messages
    logger.remove(handler_id)


def test_debug_off_logs_nothing(api, session, log_messages):
    session.request.return_value = make_response(200, {"account_name": "Acme"})
    root = api.get_root()
    assert log_messages == []
    assert root.account_name == "Acme"


def test_debug_on_logs_request_and_response(api, session, log_messages):
    session.request.return_value = make_response(200, {"account_name": "Acme"})
    api.debug = True
    root = api.get_campaigns(datatypes.CampaignQueryParams(status="sent"))
    output = "".join(log_messages)

    assert f"URL: {ENDPOINT}/campaigns" in output
    assert "'status': 'sent'" in output
    assert "Status Code: 200" in output
    assert "Acme" in output
    assert API_KEY not in output, "The API key must never be logged"
    assert root.total_items == 0


def test_debug_truncates_long_bodies(api, session, log_messages):
    session.request.return_value = make_response(200, {"name": "y" * 1200})
    api.debug = True
    api.create_template(datatypes.TemplateCreationRequest(name="T", html="x" * 600))
    body_lines = [m for m in log_messages if m.startswith("  Body:")]

    assert len(body_lines) == 2
    request_line, response_line = body_lines
    assert '"html":"' + "x" * 400 in request_line
    assert "x" * 600 not in request_line
    assert request_line.rstrip().endswith("...(truncated)")
    assert "y" * 900 in response_line
    assert "y" * 1200 not in response_line
    assert response_line.rstrip().endswith("...(truncated)")


def test_debug_does_not_change_errors(api, session, log_messages):
    session.request.return_value = make_response(
        404, {"status": 404, "title": "Not Found", "detail": "gone"}
    )
    api.debug = True
    with pytest.raises(APIError):
        api.get_root()
    assert any("Status Code: 404" in m for m in log_messages)


# --- Campaign Actions ---


def test_schedule_campaign_sends_utc_time(api, session):
    session.request.return_value = make_response(204)
    assert api.schedule_campaign("c1", datetime(2026, 3, 1, 9, 15)) is True
    assert sent_request(session)["url"] == f"{ENDPOINT}/campaigns/c1/actions/schedule"
    assert sent_json(session) == {"schedule_time": "2026-03-01T09:15:00Z"}

    paris = timezone(timedelta(hours=2))
    api.schedule_campaign("c1", datetime(2026, 3, 1, 9, 15, tzinfo=paris))
    assert sent_json(session) == {"schedule_time": "2026-03-01T07:15:00Z"}


def test_send_test_email(api, session):
    session.request.return_value = make_response(204)
    body = datatypes.TestEmailRequest(test_emails=["qa@example.com"])
    assert api.send_test_email("c1", body) is True
    assert sent_request(session)["url"] == f"{ENDPOINT}/campaigns/c1/actions/test"
    assert sent_json(session) == {"test_emails": ["qa@example.com"], "send_type": "html"}


def test_update_campaign_content_uses_put(api, session):
    session.request.return_value = make_response(200, {"html": "<p>Hi</p>"})
    content = api.update_campaign_content(
        "c1", datatypes.CampaignContentUpdateRequest(html="<p>Hi</p>")
    )
    assert sent_request(session)["method"] == "PUT"
    assert sent_request(session)["url"] == f"{ENDPOINT}/campaigns/c1/content"
    assert "template" not in sent_json(session)
    assert content.html == "<p>Hi</p>"


# --- Other Endpoints ---


def test_batch_operations(api, session):
    session.request.return_value = make_response(
        200, {"id": "b1", "status": "pending", "total_operations": 1}
    )
    body = datatypes.BatchOperationCreationRequest(
        operations=[
            datatypes.BatchOperation(
                method="POST", path="/lists/L1/members", body='{"email_address": "a@b.c"}'
            )
        ]
    )
    batch = api.create_batch_operation(body)
    assert batch.id == "b1"
    operation = sent_json(session)["operations"][0]
    assert operation["path"] == "/lists/L1/members"
    assert "params" not in operation

    session.request.return_value = make_response(
        200, {"total_items": 1, "batches": [{"id": "b1", "status": "finished"}]}
    )
    batches = api.get_batch_operations(datatypes.ExtendedQueryParams(count=5))
    assert batches.batches[0].status == "finished"
    assert sent_request(session)["params"] == {"count": "5"}


def test_folders(api, session):
    session.request.return_value = make_response(
        200, {"total_items": 2, "folders": [{"id": "f1", "name": "A"}, {"id": "f2", "name": "B"}]}
    )
    folders = api.get_template_folders()
    assert [f.name for f in folders.folders] == ["A", "B"]
    assert sent_request(session)["url"] == f"{ENDPOINT}/template-folders"

    session.request.return_value = make_response(200, {"id": "f3", "name": "Spring"})
    folder = api.create_campaign_folder(datatypes.CampaignFolderCreationRequest(name="Spring"))
    assert folder.id == "f3"
    assert sent_request(session)["url"] == f"{ENDPOINT}/campaign-folders"
    assert sent_json(session) == {"name": "Spring"}


def test_template_default_content(api, session):
    session.request.return_value = make_response(200, {"sections": {"header": "<h1/>"}})
    content = api.get_template_default_content(42)
    assert content.sections == {"header": "<h1/>"}
    assert sent_request(session)["url"] == f"{ENDPOINT}/templates/42/default-content"


# --- Runtime Type Checking ---


def test_wrong_argument_type_is_rejected_before_io(api, session):
    with pytest.raises(BeartypeCallHintParamViolation):
        api.get_list(123)
    session.request.assert_not_called()

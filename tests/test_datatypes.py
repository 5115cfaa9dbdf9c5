import json

import pytest

from mailchimp_python_api import datatypes
from mailchimp_python_api.errors import APIError, ResponseDecodeError


# --- Query Parameters ---


def test_query_params_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        datatypes.QueryParams()


def test_basic_params_defaults_are_all_empty():
    params = datatypes.BasicQueryParams().to_params()
    assert set(params) == {"status", "sort_field", "sort_dir", "fields", "exclude_fields"}
    assert all(value == "" for value in params.values())


def test_lists_are_comma_joined():
    params = datatypes.BasicQueryParams(
        fields=["id", "name"], exclude_fields=["_links"]
    ).to_params()
    assert params["fields"] == "id,name"
    assert params["exclude_fields"] == "_links"


def test_count_and_offset():
    assert datatypes.ExtendedQueryParams().to_params()["count"] == ""
    params = datatypes.ExtendedQueryParams(count=0, offset=20).to_params()
    assert params["count"] == "0"
    assert params["offset"] == "20"


def test_member_flags():
    assert datatypes.MemberQueryParams().to_params()["vip_only"] == ""
    assert datatypes.MemberQueryParams(vip_only=False).to_params()["vip_only"] == ""
    params = datatypes.MemberQueryParams(
        vip_only=True, interest_ids=["a1", "b2"], interest_match="any"
    ).to_params()
    assert params["vip_only"] == "true"
    assert params["interest_ids"] == "a1,b2"
    assert params["interest_match"] == "any"


def test_subclasses_include_inherited_params():
    params = datatypes.CampaignQueryParams(
        type=datatypes.CAMPAIGN_TYPE_REGULAR, sort_dir="DESC", folder_id="f1"
    ).to_params()
    assert params["type"] == "regular"
    assert params["sort_dir"] == "DESC"
    assert params["folder_id"] == "f1"
    assert "count" in params and "before_send_time" in params

    params = datatypes.TemplateQueryParams(created_by="me").to_params()
    assert params["created_by"] == "me"
    assert "offset" in params

    params = datatypes.ListQueryParams(email="john@example.com").to_params()
    assert params["email"] == "john@example.com"


# --- Wire Models ---


def test_links_alias_is_decoded():
    payload = {
        "total_items": 1,
        "lists": [{"id": "L1"}],
        "_links": [
            {
                "rel": "parent",
                "href": "https://us6.api.mailchimp.com/3.0/",
                "method": "GET",
                "targetSchema": "https://us6.api.mailchimp.com/schema/3.0/Root.json",
                "schema": "https://us6.api.mailchimp.com/schema/3.0/Lists.json",
            }
        ],
    }
    lists = datatypes.ListOfLists.model_validate(payload)
    assert lists.links[0].rel == "parent"
    assert lists.links[0].schema_.endswith("Lists.json")
    assert lists.lists[0].id == "L1"

    dumped = lists.model_dump(by_alias=True)
    assert "_links" in dumped
    assert dumped["_links"][0]["schema"].endswith("Lists.json")


def test_responses_tolerate_missing_and_unknown_fields():
    member = datatypes.Member.model_validate(
        {"id": "abc", "some_future_field": {"nested": True}}
    )
    assert member.id == "abc"
    assert member.status == ""
    assert member.stats.avg_open_rate == 0.0
    assert member.tags is None


def test_member_request_round_trip():
    request = datatypes.MemberRequest(
        email_address="john@example.com",
        status=datatypes.MEMBER_STATUS_PENDING,
        merge_fields={"FNAME": "John", "AGE": 42},
        interests={"abc123": True},
        tags=["vip"],
    )
    encoded = request.model_dump_json(by_alias=True, exclude_none=True)
    assert "status_if_new" not in json.loads(encoded)
    assert datatypes.MemberRequest.model_validate_json(encoded) == request


def test_webhook_request_round_trip():
    request = datatypes.WebHookRequest(
        url="https://example.com/hook",
        events=datatypes.HookEvents(subscribe=True, cleaned=True),
        sources=datatypes.HookSources(api=True),
    )
    encoded = request.model_dump_json(by_alias=True, exclude_none=True)
    assert datatypes.WebHookRequest.model_validate_json(encoded) == request


def test_campaign_request_round_trip():
    request = datatypes.CampaignCreationRequest(
        type=datatypes.CAMPAIGN_TYPE_PLAINTEXT,
        recipients=datatypes.CampaignCreationRecipients(list_id="L1"),
        settings=datatypes.CampaignCreationSettings(
            subject_line="Spring sale", from_name="Acme", reply_to="news@acme.test"
        ),
        tracking=datatypes.CampaignTracking(opens=True),
    )
    encoded = request.model_dump_json(by_alias=True, exclude_none=True)
    decoded = json.loads(encoded)
    assert decoded["type"] == "plaintext"
    assert decoded["recipients"] == {"list_id": "L1", "segment_opts": {}}
    assert datatypes.CampaignCreationRequest.model_validate_json(encoded) == request


def test_static_segment_condition():
    included = datatypes.new_static_segment_condition(17, True)
    excluded = datatypes.new_static_segment_condition(17, False)
    assert included.model_dump() == {
        "condition_type": "StaticSegment",
        "field": "static_segment",
        "op": "static_is",
        "value": 17,
    }
    assert excluded.op == "static_not"


def test_segment_conditions_are_encoded():
    request = datatypes.CampaignCreationRequest(
        recipients=datatypes.CampaignCreationRecipients(
            list_id="L1",
            segment_opts=datatypes.CampaignCreationSegmentOptions(
                match=datatypes.CONDITION_MATCH_ALL,
                conditions=[datatypes.new_static_segment_condition(3, False)],
            ),
        )
    )
    segment_opts = json.loads(request.model_dump_json(by_alias=True, exclude_none=True))[
        "recipients"
    ]["segment_opts"]
    assert segment_opts["match"] == "all"
    assert segment_opts["conditions"][0]["op"] == "static_not"
    assert segment_opts["conditions"][0]["value"] == 3


# --- Errors ---


def test_api_error_message():
    error = APIError(status=400, title="Invalid Resource", detail="Bad email")
    assert str(error) == "Error 400 Invalid Resource (Bad email)"
    assert error.status_code == 400
    assert error.errors == []


def test_decode_error_message():
    error = ResponseDecodeError("not a list", status_code=200, body="{}")
    assert str(error) == "[Status Code: 200] not a list"
    assert error.body == "{}"

"""
Scoped resource handles.

A handle pairs a decoded model (`data`, possibly None) with the client that
fetched it and the identifiers needed to address its sub-resources. Building
a handle never touches the network; only the methods called on it do.
"""

import hashlib
from abc import ABC, abstractmethod
from datetime import datetime
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Iterator,
    List,
    Optional,
    TypeVar,
    Union,
)

from . import datatypes
from .errors import MissingIdentifierError

if TYPE_CHECKING:
    from .mailchimp_api import MailchimpAPI

# --- Path Templates ---

MEMBERS_PATH = "/lists/{list_id}/members"
SINGLE_MEMBER_PATH = MEMBERS_PATH + "/{member_id}"
MEMBER_ACTIVITY_PATH = SINGLE_MEMBER_PATH + "/activity"
MEMBER_GOALS_PATH = SINGLE_MEMBER_PATH + "/goals"
MEMBER_NOTES_PATH = SINGLE_MEMBER_PATH + "/notes"
SINGLE_MEMBER_NOTE_PATH = MEMBER_NOTES_PATH + "/{note_id}"
MEMBER_TAGS_PATH = SINGLE_MEMBER_PATH + "/tags"
DELETE_PERMANENT_PATH = SINGLE_MEMBER_PATH + "/actions/delete-permanent"

WEBHOOKS_PATH = "/lists/{list_id}/webhooks"
SINGLE_WEBHOOK_PATH = WEBHOOKS_PATH + "/{webhook_id}"

Timeout = Optional[Union[float, int]]


def email_to_member_id(email: str) -> str:
    """
    Convert an email address to the subscriber hash Mailchimp uses as a
    member ID: the hex MD5 digest of the lowercased address.
    """
    return hashlib.md5(email.lower().encode("utf-8")).hexdigest()


R = TypeVar("R")


class Page(Generic[R]):
    """
    One page of a "list of X" response.

    Attributes:
        data: The decoded envelope model (e.g. datatypes.ListOfLists).
        items: Handles for the entities on this page.
    """

    def __init__(self, data: datatypes.BaseList, items: List[R]):
        self.data = data
        self.items = items

    @property
    def total_items(self) -> int:
        return self.data.total_items

    @property
    def links(self) -> List[datatypes.Link]:
        return self.data.links

    def __iter__(self) -> Iterator[R]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> R:
        return self.items[index]

    def __repr__(self) -> str:
        return f"Page(total_items={self.total_items}, items={len(self.items)})"


class Resource(ABC):
    """Base class of handles. Unknown attributes are read from `data`."""

    def __init__(self, api: "MailchimpAPI", data: Optional[Any] = None):
        self.api = api
        self.data = data

    def __getattr__(self, name: str) -> Any:
        data = self.__dict__.get("data")
        if data is None or name.startswith("_"):
            raise AttributeError(name)
        return getattr(data, name)

    @abstractmethod
    def can_make_request(self) -> None:
        """Raise MissingIdentifierError unless every ID needed for a call is set."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data={self.data!r})"


class ListResource(Resource):
    """A list (audience) and the entry point to its members and webhooks."""

    def __init__(
        self,
        api: "MailchimpAPI",
        list_id: str,
        data: Optional[datatypes.ListResponse] = None,
    ):
        super().__init__(api, data)
        self.list_id = list_id

    @classmethod
    def from_response(
        cls, api: "MailchimpAPI", data: datatypes.ListResponse
    ) -> "ListResource":
        return cls(api, data.id, data)

    def can_make_request(self) -> None:
        if not self.list_id:
            raise MissingIdentifierError("No list ID provided")

    # --- The list itself ---

    def refresh(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> "ListResource":
        """Re-fetch this list and replace `data`."""
        self.can_make_request()
        self.data = self.api.get_list(self.list_id, params=params, timeout=timeout).data
        return self

    def update(
        self, body: datatypes.ListCreationRequest, timeout: Timeout = None
    ) -> "ListResource":
        """
        Update this list's settings. See MailchimpAPI.update_list.

        Returns:
            ListResource: A new handle carrying the updated list.
        """
        self.can_make_request()
        return self.api.update_list(self.list_id, body, timeout=timeout)

    def delete(self, timeout: Timeout = None) -> bool:
        """Delete this list and all its members. See MailchimpAPI.delete_list."""
        self.can_make_request()
        return self.api.delete_list(self.list_id, timeout=timeout)

    # --- Members ---

    def member(
        self, email: Optional[str] = None, member_id: Optional[str] = None
    ) -> "MemberResource":
        """
        Build a handle for a member of this list without fetching it.

        Args:
            email: The member's email address, hashed when member_id is empty.
            member_id: The member's subscriber hash.

        Returns:
            MemberResource: A handle ready for member level calls.

        Raises:
            MissingIdentifierError: If neither email nor member_id is given.
        """
        if not member_id:
            if not email:
                raise MissingIdentifierError("email address or member ID is required")
            member_id = email_to_member_id(email)
        return MemberResource(self.api, self.list_id, member_id)

    def get_members(
        self,
        params: Optional[datatypes.MemberQueryParams] = None,
        timeout: Timeout = None,
    ) -> Page["MemberResource"]:
        """
        List the members of this list. Corresponds to GET /lists/{list_id}/members.

        Args:
            params: Paging and member filters (status, vip_only, interests, ...).
            timeout: Deadline in seconds for this call.

        Returns:
            Page[MemberResource]: One page of member handles bound to this list.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        endpoint = MEMBERS_PATH.format(list_id=self.list_id)
        response = self.api._call(
            "GET",
            endpoint,
            params=params,
            response_model=datatypes.ListOfMembers,
            timeout=timeout,
        )
        return Page(
            response,
            [
                MemberResource.from_response(self.api, member, self.list_id)
                for member in response.members
            ],
        )

    def get_member(
        self,
        member_id: str,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> "MemberResource":
        """
        Get a single member. Corresponds to GET /lists/{list_id}/members/{subscriber_hash}.

        Args:
            member_id: The member's subscriber hash (see email_to_member_id).
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            MemberResource: The member.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails (e.g., 404 member not found).
        """
        self.can_make_request()
        endpoint = SINGLE_MEMBER_PATH.format(list_id=self.list_id, member_id=member_id)
        response = self.api._call(
            "GET",
            endpoint,
            params=params,
            response_model=datatypes.Member,
            timeout=timeout,
        )
        return MemberResource.from_response(self.api, response, self.list_id)

    def create_member(
        self, body: datatypes.MemberRequest, timeout: Timeout = None
    ) -> "MemberResource":
        """
        Add a new member. Corresponds to POST /lists/{list_id}/members.

        Args:
            body: Email address, status and optional merge fields, interests and tags.
            timeout: Deadline in seconds for this call.

        Returns:
            MemberResource: The created member.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails (e.g., 400 member exists).
        """
        self.can_make_request()
        endpoint = MEMBERS_PATH.format(list_id=self.list_id)
        response = self.api._call(
            "POST",
            endpoint,
            body=body,
            response_model=datatypes.Member,
            timeout=timeout,
        )
        return MemberResource.from_response(self.api, response, self.list_id)

    def update_member(
        self,
        member_id: str,
        body: datatypes.MemberRequest,
        timeout: Timeout = None,
    ) -> "MemberResource":
        """
        Update an existing member. Corresponds to PATCH /lists/{list_id}/members/{subscriber_hash}.

        Args:
            member_id: The member's subscriber hash.
            body: The fields to change.
            timeout: Deadline in seconds for this call.

        Returns:
            MemberResource: The updated member.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        endpoint = SINGLE_MEMBER_PATH.format(list_id=self.list_id, member_id=member_id)
        response = self.api._call(
            "PATCH",
            endpoint,
            body=body,
            response_model=datatypes.Member,
            timeout=timeout,
        )
        return MemberResource.from_response(self.api, response, self.list_id)

    def add_or_update_member(
        self,
        member_id: Optional[str],
        body: datatypes.MemberRequest,
        timeout: Timeout = None,
    ) -> "MemberResource":
        """
        Add or update a member. Corresponds to PUT /lists/{list_id}/members/{subscriber_hash}.

        Args:
            member_id: The subscriber hash. Derived from body.email_address when empty.
            body: The member data.
            timeout: Deadline in seconds for this call.

        Returns:
            MemberResource: The stored member.

        Raises:
            MissingIdentifierError: If this handle has no list ID, or neither
                member_id nor an email address is given.
            APIError: If the API request fails.
        """
        self.can_make_request()
        if not member_id:
            if not body.email_address:
                raise MissingIdentifierError("email address or member ID is required")
            member_id = email_to_member_id(body.email_address)
        endpoint = SINGLE_MEMBER_PATH.format(list_id=self.list_id, member_id=member_id)
        response = self.api._call(
            "PUT",
            endpoint,
            body=body,
            response_model=datatypes.Member,
            timeout=timeout,
        )
        return MemberResource.from_response(self.api, response, self.list_id)

    def delete_member(self, member_id: str, timeout: Timeout = None) -> bool:
        """
        Archive a member. It can be re-added later.
        Corresponds to DELETE /lists/{list_id}/members/{subscriber_hash}.

        Args:
            member_id: The member's subscriber hash.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        endpoint = SINGLE_MEMBER_PATH.format(list_id=self.list_id, member_id=member_id)
        return self.api._call_ok("DELETE", endpoint, timeout=timeout)

    def delete_member_permanent(self, member_id: str, timeout: Timeout = None) -> bool:
        """
        Permanently erase a member and its data. This cannot be undone.
        Corresponds to POST /lists/{list_id}/members/{subscriber_hash}/actions/delete-permanent.

        Args:
            member_id: The member's subscriber hash.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        endpoint = DELETE_PERMANENT_PATH.format(
            list_id=self.list_id, member_id=member_id
        )
        return self.api._call_ok("POST", endpoint, timeout=timeout)

    # --- Webhooks ---

    def get_webhooks(self, timeout: Timeout = None) -> datatypes.ListOfWebHooks:
        """
        List the webhooks of this list. Corresponds to GET /lists/{list_id}/webhooks.

        Args:
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfWebHooks: Every webhook of the list.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        return self.api._call(
            "GET",
            WEBHOOKS_PATH.format(list_id=self.list_id),
            response_model=datatypes.ListOfWebHooks,
            timeout=timeout,
        )

    def get_webhook(self, webhook_id: str, timeout: Timeout = None) -> datatypes.WebHook:
        """
        Get a single webhook. Corresponds to GET /lists/{list_id}/webhooks/{webhook_id}.

        Args:
            webhook_id: The ID of the webhook.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.WebHook: The webhook.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails (e.g., 404 webhook not found).
        """
        self.can_make_request()
        return self.api._call(
            "GET",
            SINGLE_WEBHOOK_PATH.format(list_id=self.list_id, webhook_id=webhook_id),
            response_model=datatypes.WebHook,
            timeout=timeout,
        )

    def create_webhook(
        self, body: datatypes.WebHookRequest, timeout: Timeout = None
    ) -> datatypes.WebHook:
        """
        Create a webhook. Corresponds to POST /lists/{list_id}/webhooks.

        Args:
            body: Callback URL plus the events and sources that trigger it.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.WebHook: The created webhook.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails (e.g., URL not reachable).
        """
        self.can_make_request()
        return self.api._call(
            "POST",
            WEBHOOKS_PATH.format(list_id=self.list_id),
            body=body,
            response_model=datatypes.WebHook,
            timeout=timeout,
        )

    def update_webhook(
        self,
        webhook_id: str,
        body: datatypes.WebHookRequest,
        timeout: Timeout = None,
    ) -> datatypes.WebHook:
        """
        Update a webhook. Corresponds to PATCH /lists/{list_id}/webhooks/{webhook_id}.

        Args:
            webhook_id: The ID of the webhook.
            body: The new URL, events and sources.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.WebHook: The updated webhook.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        return self.api._call(
            "PATCH",
            SINGLE_WEBHOOK_PATH.format(list_id=self.list_id, webhook_id=webhook_id),
            body=body,
            response_model=datatypes.WebHook,
            timeout=timeout,
        )

    def delete_webhook(self, webhook_id: str, timeout: Timeout = None) -> bool:
        """
        Delete a webhook. Corresponds to DELETE /lists/{list_id}/webhooks/{webhook_id}.

        Args:
            webhook_id: The ID of the webhook.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            MissingIdentifierError: If this handle has no list ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        return self.api._call_ok(
            "DELETE",
            SINGLE_WEBHOOK_PATH.format(list_id=self.list_id, webhook_id=webhook_id),
            timeout=timeout,
        )


class MemberResource(Resource):
    """
    A list member; gives access to its notes, tags, activity and goals.

    Every call needs both `list_id` and `member_id`, and raises
    MissingIdentifierError before any I/O when either is empty.
    """

    def __init__(
        self,
        api: "MailchimpAPI",
        list_id: str,
        member_id: str,
        data: Optional[datatypes.Member] = None,
    ):
        super().__init__(api, data)
        self.list_id = list_id
        self.member_id = member_id

    @classmethod
    def from_response(
        cls, api: "MailchimpAPI", data: datatypes.Member, list_id: str = ""
    ) -> "MemberResource":
        return cls(api, data.list_id or list_id, data.id, data)

    def set_id_by_mail(self, email: str) -> "MemberResource":
        """Set `member_id` to the subscriber hash of `email`."""
        self.member_id = email_to_member_id(email)
        return self

    def can_make_request(self) -> None:
        if not self.list_id:
            raise MissingIdentifierError("No list ID provided")
        if not self.member_id:
            raise MissingIdentifierError("No member ID provided")

    def _path(self, template: str, **kwargs: Any) -> str:
        self.can_make_request()
        return template.format(list_id=self.list_id, member_id=self.member_id, **kwargs)

    # --- The member itself ---

    def refresh(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> "MemberResource":
        """Re-fetch this member and replace `data`."""
        self.data = self.api._call(
            "GET",
            self._path(SINGLE_MEMBER_PATH),
            params=params,
            response_model=datatypes.Member,
            timeout=timeout,
        )
        return self

    def update(
        self, body: datatypes.MemberRequest, timeout: Timeout = None
    ) -> "MemberResource":
        """
        Update this member (PATCH) and replace `data` with the result.

        Args:
            body: The fields to change.
            timeout: Deadline in seconds for this call.

        Returns:
            MemberResource: This handle.

        Raises:
            APIError: If the API request fails.
        """
        self.data = self.api._call(
            "PATCH",
            self._path(SINGLE_MEMBER_PATH),
            body=body,
            response_model=datatypes.Member,
            timeout=timeout,
        )
        return self

    def delete(self, timeout: Timeout = None) -> bool:
        """Archive this member. Returns True on success."""
        return self.api._call_ok(
            "DELETE", self._path(SINGLE_MEMBER_PATH), timeout=timeout
        )

    # --- Activity & goals ---

    def get_activity(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.ListOfMemberActivity:
        """
        Get the last 50 events of this member. Corresponds to GET .../members/{subscriber_hash}/activity.

        Args:
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfMemberActivity: Opens, clicks, bounces and other events.

        Raises:
            APIError: If the API request fails.
        """
        return self.api._call(
            "GET",
            self._path(MEMBER_ACTIVITY_PATH),
            params=params,
            response_model=datatypes.ListOfMemberActivity,
            timeout=timeout,
        )

    def get_goals(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.ListOfMemberGoals:
        """
        Get the last 50 goal events of this member. Corresponds to GET .../members/{subscriber_hash}/goals.

        Args:
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfMemberGoals: The goal events.

        Raises:
            APIError: If the API request fails.
        """
        return self.api._call(
            "GET",
            self._path(MEMBER_GOALS_PATH),
            params=params,
            response_model=datatypes.ListOfMemberGoals,
            timeout=timeout,
        )

    # --- Notes ---

    def get_notes(
        self,
        params: Optional[datatypes.ExtendedQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.ListOfMemberNotes:
        """
        List the notes on this member. Corresponds to GET .../members/{subscriber_hash}/notes.

        Args:
            params: Paging, sorting and field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfMemberNotes: One page of notes.

        Raises:
            APIError: If the API request fails.
        """
        return self.api._call(
            "GET",
            self._path(MEMBER_NOTES_PATH),
            params=params,
            response_model=datatypes.ListOfMemberNotes,
            timeout=timeout,
        )

    def get_note(
        self,
        note_id: Union[int, str],
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.MemberNoteLong:
        """
        Get a single note. Corresponds to GET .../members/{subscriber_hash}/notes/{note_id}.

        Args:
            note_id: The ID of the note.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.MemberNoteLong: The note.

        Raises:
            APIError: If the API request fails (e.g., 404 note not found).
        """
        return self.api._call(
            "GET",
            self._path(SINGLE_MEMBER_NOTE_PATH, note_id=note_id),
            params=params,
            response_model=datatypes.MemberNoteLong,
            timeout=timeout,
        )

    def create_note(self, note: str, timeout: Timeout = None) -> datatypes.MemberNoteLong:
        """
        Add a note to this member. Corresponds to POST .../members/{subscriber_hash}/notes.

        Args:
            note: The note text, up to 1,000 characters.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.MemberNoteLong: The created note.

        Raises:
            APIError: If the API request fails.
        """
        return self.api._call(
            "POST",
            self._path(MEMBER_NOTES_PATH),
            body=datatypes.MemberNoteRequest(note=note),
            response_model=datatypes.MemberNoteLong,
            timeout=timeout,
        )

    def update_note(
        self, note_id: Union[int, str], note: str, timeout: Timeout = None
    ) -> datatypes.MemberNoteLong:
        """
        Replace the text of a note. Corresponds to PATCH .../members/{subscriber_hash}/notes/{note_id}.

        Args:
            note_id: The ID of the note.
            note: The new note text.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.MemberNoteLong: The updated note.

        Raises:
            APIError: If the API request fails.
        """
        return self.api._call(
            "PATCH",
            self._path(SINGLE_MEMBER_NOTE_PATH, note_id=note_id),
            body=datatypes.MemberNoteRequest(note=note),
            response_model=datatypes.MemberNoteLong,
            timeout=timeout,
        )

    def delete_note(self, note_id: Union[int, str], timeout: Timeout = None) -> bool:
        """
        Delete a note. Corresponds to DELETE .../members/{subscriber_hash}/notes/{note_id}.

        Args:
            note_id: The ID of the note.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails.
        """
        return self.api._call_ok(
            "DELETE",
            self._path(SINGLE_MEMBER_NOTE_PATH, note_id=note_id),
            timeout=timeout,
        )

    # --- Tags ---

    def get_tags(
        self,
        params: Optional[datatypes.ExtendedQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.ListOfMemberTags:
        """
        List the tags on this member. Corresponds to GET .../members/{subscriber_hash}/tags.

        Args:
            params: Paging and field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfMemberTags: One page of tags.

        Raises:
            APIError: If the API request fails.
        """
        return self.api._call(
            "GET",
            self._path(MEMBER_TAGS_PATH),
            params=params,
            response_model=datatypes.ListOfMemberTags,
            timeout=timeout,
        )

    def update_tags(
        self, tags: List[datatypes.UpdateMemberTag], timeout: Timeout = None
    ) -> datatypes.ListOfMemberTags:
        """
        Add or remove tags. Corresponds to POST .../members/{subscriber_hash}/tags.
        Mailchimp answers 204, so the returned model is usually empty.

        Args:
            tags: Tags to set; those with status "inactive" are removed.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfMemberTags: The decoded response, empty on 204.

        Raises:
            APIError: If the API request fails.
        """
        return self.api._call(
            "POST",
            self._path(MEMBER_TAGS_PATH),
            body=datatypes.UpdateMemberTagsRequest(tags=tags),
            response_model=datatypes.ListOfMemberTags,
            timeout=timeout,
        )


class CampaignResource(Resource):
    """
    A campaign. Its methods forward to the matching MailchimpAPI campaign
    calls after checking that `campaign_id` is set.
    """

    def __init__(
        self,
        api: "MailchimpAPI",
        campaign_id: str,
        data: Optional[datatypes.CampaignResponse] = None,
    ):
        super().__init__(api, data)
        self.campaign_id = campaign_id

    @classmethod
    def from_response(
        cls, api: "MailchimpAPI", data: datatypes.CampaignResponse
    ) -> "CampaignResource":
        return cls(api, data.id, data)

    def can_make_request(self) -> None:
        if not self.campaign_id:
            raise MissingIdentifierError("No ID provided on campaign")

    def refresh(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> "CampaignResource":
        """Re-fetch this campaign and replace `data`."""
        self.can_make_request()
        self.data = self.api.get_campaign(
            self.campaign_id, params=params, timeout=timeout
        ).data
        return self

    def update(
        self, body: datatypes.CampaignCreationRequest, timeout: Timeout = None
    ) -> "CampaignResource":
        """
        Update this campaign's settings. See MailchimpAPI.update_campaign.

        Returns:
            CampaignResource: A new handle carrying the updated campaign.
        """
        self.can_make_request()
        return self.api.update_campaign(self.campaign_id, body, timeout=timeout)

    def delete(self, timeout: Timeout = None) -> bool:
        """Delete this campaign. See MailchimpAPI.delete_campaign."""
        self.can_make_request()
        return self.api.delete_campaign(self.campaign_id, timeout=timeout)

    def get_content(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.CampaignContentResponse:
        """Get this campaign's HTML and plain-text content. See MailchimpAPI.get_campaign_content."""
        self.can_make_request()
        return self.api.get_campaign_content(
            self.campaign_id, params=params, timeout=timeout
        )

    def update_content(
        self, body: datatypes.CampaignContentUpdateRequest, timeout: Timeout = None
    ) -> datatypes.CampaignContentResponse:
        """Set this campaign's content. See MailchimpAPI.update_campaign_content."""
        self.can_make_request()
        return self.api.update_campaign_content(self.campaign_id, body, timeout=timeout)

    def send(self, timeout: Timeout = None) -> bool:
        """
        Send this campaign now. See MailchimpAPI.send_campaign.

        Args:
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True once the campaign is accepted for sending.

        Raises:
            MissingIdentifierError: If this handle has no campaign ID.
            APIError: If the API request fails (e.g., campaign not ready to send).
        """
        self.can_make_request()
        return self.api.send_campaign(self.campaign_id, timeout=timeout)

    def send_test_email(
        self, body: datatypes.TestEmailRequest, timeout: Timeout = None
    ) -> bool:
        """Send a test email of this campaign. See MailchimpAPI.send_test_email."""
        self.can_make_request()
        return self.api.send_test_email(self.campaign_id, body, timeout=timeout)

    def schedule(self, schedule_time: datetime, timeout: Timeout = None) -> bool:
        """
        Schedule this campaign. See MailchimpAPI.schedule_campaign.

        Args:
            schedule_time: When to send, on the quarter-hour. Naive datetimes are taken as UTC.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            MissingIdentifierError: If this handle has no campaign ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        return self.api.schedule_campaign(
            self.campaign_id, schedule_time, timeout=timeout
        )

    def unschedule(self, timeout: Timeout = None) -> bool:
        """Unschedule this campaign. See MailchimpAPI.unschedule_campaign."""
        self.can_make_request()
        return self.api.unschedule_campaign(self.campaign_id, timeout=timeout)


class TemplateResource(Resource):
    """A template. Its methods forward to the MailchimpAPI template calls."""

    def __init__(
        self,
        api: "MailchimpAPI",
        template_id: Union[int, str],
        data: Optional[datatypes.TemplateResponse] = None,
    ):
        super().__init__(api, data)
        self.template_id = template_id

    @classmethod
    def from_response(
        cls, api: "MailchimpAPI", data: datatypes.TemplateResponse
    ) -> "TemplateResource":
        return cls(api, data.id, data)

    def can_make_request(self) -> None:
        if not self.template_id:
            raise MissingIdentifierError("No ID provided on template")

    def refresh(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> "TemplateResource":
        """Re-fetch this template and replace `data`."""
        self.can_make_request()
        self.data = self.api.get_template(
            self.template_id, params=params, timeout=timeout
        ).data
        return self

    def update(
        self, body: datatypes.TemplateCreationRequest, timeout: Timeout = None
    ) -> "TemplateResource":
        """
        Update this template. See MailchimpAPI.update_template.

        Returns:
            TemplateResource: A new handle carrying the updated template.
        """
        self.can_make_request()
        return self.api.update_template(self.template_id, body, timeout=timeout)

    def delete(self, timeout: Timeout = None) -> bool:
        """Delete this template. See MailchimpAPI.delete_template."""
        self.can_make_request()
        return self.api.delete_template(self.template_id, timeout=timeout)

    def get_default_content(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.TemplateDefaultContentResponse:
        """
        Get the editable sections of this template. See MailchimpAPI.get_template_default_content.

        Args:
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.TemplateDefaultContentResponse: Section name to default content.

        Raises:
            MissingIdentifierError: If this handle has no template ID.
            APIError: If the API request fails.
        """
        self.can_make_request()
        return self.api.get_template_default_content(
            self.template_id, params=params, timeout=timeout
        )

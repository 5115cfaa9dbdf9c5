"""
Pydantic models for the Mailchimp Marketing API v3.0 wire schemas.

Field names match the JSON keys of the API. The only exception is the
hypermedia `_links` array, exposed as `links`.

Reference: https://mailchimp.com/developer/marketing/api/
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# --- Constants ---

CAMPAIGN_TYPE_REGULAR = "regular"
CAMPAIGN_TYPE_PLAINTEXT = "plaintext"
CAMPAIGN_TYPE_ABSPLIT = "absplit"  # deprecated by mailchimp
CAMPAIGN_TYPE_RSS = "rss"
CAMPAIGN_TYPE_VARIATE = "variate"

CAMPAIGN_SEND_TYPE_HTML = "html"
CAMPAIGN_SEND_TYPE_PLAINTEXT = "plaintext"

CONDITION_MATCH_ANY = "any"
CONDITION_MATCH_ALL = "all"

CONDITION_TYPE_INTERESTS = "Interests"

CONDITION_OP_CONTAINS = "interestcontains"

MEMBER_STATUS_SUBSCRIBED = "subscribed"
MEMBER_STATUS_UNSUBSCRIBED = "unsubscribed"
MEMBER_STATUS_CLEANED = "cleaned"
MEMBER_STATUS_PENDING = "pending"
MEMBER_STATUS_TRANSACTIONAL = "transactional"


class MailchimpModel(BaseModel):
    """Common configuration for every wire model."""

    # NaN and Infinity serialize as bare constants; the client rejects them before sending
    model_config = ConfigDict(populate_by_name=True, ser_json_inf_nan="constants")


# --- Query Parameters ---


def _join(values: List[str]) -> str:
    return ",".join(values)


def _flag(value: Optional[bool]) -> str:
    return "true" if value else ""


def _number(value: Optional[int]) -> str:
    return "" if value is None else str(value)


class QueryParams(MailchimpModel):
    """
    Anything that can be sent as URL query parameters.

    Subclasses return every parameter they know about from `to_params`,
    including empty ones; the client drops empty values before sending.
    """

    @abstractmethod
    def to_params(self) -> Dict[str, str]:
        """Return a flat mapping of parameter name to string value."""


class BasicQueryParams(QueryParams):
    status: str = ""
    sort_field: str = ""
    sort_dir: str = ""
    fields: List[str] = Field(default_factory=list)
    exclude_fields: List[str] = Field(default_factory=list)

    def to_params(self) -> Dict[str, str]:
        return {
            "status": self.status,
            "sort_field": self.sort_field,
            "sort_dir": self.sort_dir,
            "fields": _join(self.fields),
            "exclude_fields": _join(self.exclude_fields),
        }


class ExtendedQueryParams(BasicQueryParams):
    count: Optional[int] = None
    offset: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        params = super().to_params()
        params["count"] = _number(self.count)
        params["offset"] = _number(self.offset)
        return params


class CampaignQueryParams(ExtendedQueryParams):
    type: str = ""
    before_send_time: str = ""
    since_send_time: str = ""
    before_create_time: str = ""
    since_create_time: str = ""
    list_id: str = ""
    folder_id: str = ""

    def to_params(self) -> Dict[str, str]:
        params = super().to_params()
        params["type"] = self.type
        params["before_send_time"] = self.before_send_time
        params["since_send_time"] = self.since_send_time
        params["before_create_time"] = self.before_create_time
        params["since_create_time"] = self.since_create_time
        params["list_id"] = self.list_id
        params["folder_id"] = self.folder_id
        return params


class ListQueryParams(ExtendedQueryParams):
    before_date_created: str = ""
    since_date_created: str = ""
    before_campaign_last_sent: str = ""
    since_campaign_last_sent: str = ""
    email: str = ""

    def to_params(self) -> Dict[str, str]:
        params = super().to_params()
        params["before_date_created"] = self.before_date_created
        params["since_date_created"] = self.since_date_created
        params["before_campaign_last_sent"] = self.before_campaign_last_sent
        params["since_campaign_last_sent"] = self.since_campaign_last_sent
        params["email"] = self.email
        return params


class MemberQueryParams(ExtendedQueryParams):
    email_type: str = ""
    since_timestamp_opt: str = ""
    before_timestamp_opt: str = ""
    since_last_changed: str = ""
    before_last_changed: str = ""
    unique_email_id: str = ""
    vip_only: Optional[bool] = None
    interest_category_id: str = ""
    interest_ids: List[str] = Field(default_factory=list)
    interest_match: str = ""

    def to_params(self) -> Dict[str, str]:
        params = super().to_params()
        params["email_type"] = self.email_type
        params["since_timestamp_opt"] = self.since_timestamp_opt
        params["before_timestamp_opt"] = self.before_timestamp_opt
        params["since_last_changed"] = self.since_last_changed
        params["before_last_changed"] = self.before_last_changed
        params["unique_email_id"] = self.unique_email_id
        params["vip_only"] = _flag(self.vip_only)
        params["interest_category_id"] = self.interest_category_id
        params["interest_ids"] = _join(self.interest_ids)
        params["interest_match"] = self.interest_match
        return params


class TemplateQueryParams(ExtendedQueryParams):
    created_by: str = ""
    since_created_at: str = ""
    before_created_at: str = ""
    type: str = ""
    category: str = ""
    folder_id: str = ""

    def to_params(self) -> Dict[str, str]:
        params = super().to_params()
        params["created_by"] = self.created_by
        params["since_created_at"] = self.since_created_at
        params["before_created_at"] = self.before_created_at
        params["type"] = self.type
        params["category"] = self.category
        params["folder_id"] = self.folder_id
        return params


class CampaignFolderQueryParams(ExtendedQueryParams):
    pass


class TemplateFolderQueryParams(ExtendedQueryParams):
    pass


# --- Shared Envelopes ---


class Link(MailchimpModel):
    rel: str = ""
    href: str = ""
    method: str = ""
    targetSchema: str = ""
    schema_: str = Field(default="", alias="schema")


class WithLinks(MailchimpModel):
    links: List[Link] = Field(default_factory=list, alias="_links")


class BaseList(WithLinks):
    """Envelope of every "list of X" response."""

    total_items: int = 0


class Address(MailchimpModel):
    company: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""
    phone: str = ""


# --- Root ---


class IndustryStats(MailchimpModel):
    open_rate: float = 0.0
    bounce_rate: float = 0.0
    click_rate: float = 0.0


class RootResponse(WithLinks):
    account_id: str = ""
    login_id: str = ""
    account_name: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    avatar_url: str = ""
    role: str = ""
    member_since: str = ""
    pricing_plan_type: str = ""
    first_payment: str = ""
    account_timezone: str = ""
    account_industry: str = ""
    contact: Address = Field(default_factory=Address)
    pro_enabled: bool = False
    last_login: str = ""
    total_subscribers: int = 0
    industry_stats: IndustryStats = Field(default_factory=IndustryStats)


# --- Batches ---


class BatchOperation(MailchimpModel):
    method: str = ""
    path: str = ""
    params: Optional[Dict[str, List[str]]] = None
    body: str = ""
    operation_id: Optional[str] = None


class BatchOperationCreationRequest(MailchimpModel):
    operations: List[BatchOperation] = Field(default_factory=list)


class BatchOperationResponse(WithLinks):
    id: str = ""
    status: str = ""
    total_operations: int = 0
    finished_operations: int = 0
    errored_operations: int = 0
    submitted_at: Optional[str] = None
    completed_at: Optional[str] = None
    response_body_url: str = ""


class ListOfBatchOperations(BaseList):
    batches: List[BatchOperationResponse] = Field(default_factory=list)


# --- Campaigns ---


class InterestsCondition(MailchimpModel):
    condition_type: str = CONDITION_TYPE_INTERESTS
    field: str = ""
    op: str = ""
    value: List[str] = Field(default_factory=list)


class StaticSegmentCondition(MailchimpModel):
    condition_type: str = "StaticSegment"
    field: str = "static_segment"
    op: str = ""
    value: int = 0


def new_static_segment_condition(
    segment_id: int, is_equal: bool
) -> StaticSegmentCondition:
    """Build a condition matching (or excluding) members of a static segment."""
    return StaticSegmentCondition(
        value=segment_id, op="static_is" if is_equal else "static_not"
    )


class CampaignCreationSegmentOptions(MailchimpModel):
    saved_segment_id: Optional[int] = None
    match: Optional[str] = None  # one of CONDITION_MATCH_*
    # accepts various condition payloads, see the campaigns reference
    conditions: Optional[
        List[Union[StaticSegmentCondition, InterestsCondition, Dict[str, Any]]]
    ] = None


class CampaignCreationRecipients(MailchimpModel):
    list_id: str = ""
    segment_opts: CampaignCreationSegmentOptions = Field(
        default_factory=CampaignCreationSegmentOptions
    )


class CampaignCreationSettings(MailchimpModel):
    subject_line: str = ""
    preview_text: str = ""
    title: str = ""
    from_name: str = ""
    reply_to: str = ""
    use_conversation: bool = False
    to_name: str = ""
    folder_id: str = ""
    authenticate: bool = False
    auto_footer: bool = False
    inline_css: bool = False
    auto_tweet: bool = False
    fb_comments: bool = False
    template_id: int = 0


class CampaignTracking(MailchimpModel):
    opens: bool = False
    html_clicks: bool = False
    text_clicks: bool = False
    goal_tracking: bool = False
    ecomm360: bool = False
    google_analytics: str = ""
    clicktale: str = ""


class CampaignCreationRequest(MailchimpModel):
    type: str = CAMPAIGN_TYPE_REGULAR  # one of CAMPAIGN_TYPE_*
    recipients: CampaignCreationRecipients = Field(
        default_factory=CampaignCreationRecipients
    )
    settings: CampaignCreationSettings = Field(default_factory=CampaignCreationSettings)
    tracking: CampaignTracking = Field(default_factory=CampaignTracking)


class CampaignResponseRecipients(MailchimpModel):
    list_id: str = ""
    list_name: str = ""
    segment_text: str = ""
    recipient_count: int = 0


class CampaignResponseSettings(CampaignCreationSettings):
    timewarp: bool = False
    drag_and_drop: bool = False


class CampaignEcommerce(MailchimpModel):
    total_orders: int = 0
    total_spent: float = 0
    total_revenue: float = 0


class CampaignReportSummary(MailchimpModel):
    opens: int = 0
    unique_opens: int = 0
    open_rate: float = 0.0
    clicks: int = 0
    subscriber_clicks: int = 0
    click_rate: float = 0.0
    ecommerce: CampaignEcommerce = Field(default_factory=CampaignEcommerce)


class CampaignDeliveryStatus(MailchimpModel):
    enabled: bool = False
    can_cancel: bool = False
    status: str = ""  # delivering, delivered, canceling or canceled
    emails_sent: int = 0
    emails_canceled: int = 0


class CampaignResponse(WithLinks):
    id: str = ""
    web_id: int = 0
    type: str = ""
    create_time: str = ""
    archive_url: str = ""
    long_archive_url: str = ""
    status: str = ""
    emails_sent: int = 0
    send_time: str = ""
    content_type: str = ""
    needs_block_refresh: bool = False
    recipients: CampaignResponseRecipients = Field(
        default_factory=CampaignResponseRecipients
    )
    settings: CampaignResponseSettings = Field(default_factory=CampaignResponseSettings)
    tracking: CampaignTracking = Field(default_factory=CampaignTracking)
    report_summary: CampaignReportSummary = Field(default_factory=CampaignReportSummary)
    delivery_status: CampaignDeliveryStatus = Field(
        default_factory=CampaignDeliveryStatus
    )


class ListOfCampaigns(BaseList):
    campaigns: List[CampaignResponse] = Field(default_factory=list)


class TestEmailRequest(MailchimpModel):
    __test__ = False

    test_emails: List[str] = Field(default_factory=list)
    send_type: str = CAMPAIGN_SEND_TYPE_HTML  # one of CAMPAIGN_SEND_TYPE_*


class SendCampaignRequest(MailchimpModel):
    campaign_id: str = ""


class ScheduleCampaignRequest(MailchimpModel):
    # UTC, ISO 8601. Only quarter-hour times (:00, :15, :30, :45) are accepted.
    schedule_time: str = ""


class CampaignContentTemplateRequest(MailchimpModel):
    id: Optional[int] = None
    sections: Optional[Dict[str, str]] = None


class CampaignContentUpdateRequest(MailchimpModel):
    plain_text: str = ""
    html: str = ""
    url: str = ""
    template: Optional[CampaignContentTemplateRequest] = None


class CampaignContentResponse(WithLinks):
    plain_text: str = ""
    html: str = ""
    archive_html: str = ""


# --- Folders ---


class CampaignFolder(WithLinks):
    name: str = ""
    id: str = ""
    count: int = 0


class CampaignFolderCreationRequest(MailchimpModel):
    name: str = ""


class ListOfCampaignFolders(BaseList):
    folders: List[CampaignFolder] = Field(default_factory=list)


class TemplateFolder(WithLinks):
    name: str = ""
    id: str = ""
    count: int = 0


class TemplateFolderCreationRequest(MailchimpModel):
    name: str = ""


class ListOfTemplateFolders(BaseList):
    folders: List[TemplateFolder] = Field(default_factory=list)


# --- Lists ---


class CampaignDefaults(MailchimpModel):
    from_name: str = ""
    from_email: str = ""
    subject: str = ""
    language: str = ""


class ListCreationRequest(MailchimpModel):
    name: str = ""
    contact: Address = Field(default_factory=Address)
    permission_reminder: str = ""
    use_archive_bar: bool = False
    campaign_defaults: CampaignDefaults = Field(default_factory=CampaignDefaults)
    notify_on_subscribe: str = ""
    notify_on_unsubscribe: str = ""
    email_type_option: bool = False
    visibility: Optional[str] = None  # pub or prv


class ListStats(MailchimpModel):
    member_count: int = 0
    unsubscribe_count: int = 0
    cleaned_count: int = 0
    member_count_since_send: int = 0
    unsubscribe_count_since_send: int = 0
    cleaned_count_since_send: int = 0
    campaign_count: int = 0
    campaign_last_sent: str = ""
    merge_field_count: int = 0
    avg_sub_rate: float = 0.0
    avg_unsub_rate: float = 0.0
    target_sub_rate: float = 0.0
    open_rate: float = 0.0
    click_rate: float = 0.0
    last_sub_date: str = ""
    last_unsub_date: str = ""


class ListResponse(ListCreationRequest):
    links: List[Link] = Field(default_factory=list, alias="_links")

    id: str = ""
    web_id: int = 0
    date_created: str = ""
    list_rating: int = 0
    subscribe_url_short: str = ""
    subscribe_url_long: str = ""
    beamer_address: str = ""
    modules: List[str] = Field(default_factory=list)
    stats: ListStats = Field(default_factory=ListStats)


class ListOfLists(BaseList):
    lists: List[ListResponse] = Field(default_factory=list)


# --- Members ---


class MemberLocation(MailchimpModel):
    latitude: float = 0.0
    longitude: float = 0.0
    gmtoff: int = 0
    dstoff: int = 0
    country_code: str = ""
    timezone: str = ""


class MarketingPermission(MailchimpModel):
    marketing_permission_id: str = ""
    text: str = ""
    enabled: bool = False


class MemberTag(MailchimpModel):
    id: int = 0
    name: str = ""


class MemberStats(MailchimpModel):
    avg_open_rate: float = 0.0
    avg_click_rate: float = 0.0


class MemberNoteShort(MailchimpModel):
    note_id: int = 0
    created_at: str = ""
    created_by: str = ""
    note: str = ""


class MemberRequest(MailchimpModel):
    email_address: str = ""
    email_type: Optional[str] = None
    status: str = ""
    status_if_new: Optional[str] = None
    merge_fields: Optional[Dict[str, Any]] = None
    interests: Optional[Dict[str, bool]] = None
    language: str = ""
    vip: bool = False
    location: Optional[MemberLocation] = None
    marketing_permissions: Optional[List[MarketingPermission]] = None
    ip_opt: Optional[str] = None
    ip_signup: Optional[str] = None
    tags: Optional[List[str]] = None
    timestamp_signup: Optional[str] = None
    timestamp_opt: Optional[str] = None


class Member(WithLinks):
    id: str = ""
    list_id: str = ""
    unique_email_id: str = ""
    email_address: str = ""
    email_type: str = ""
    status: str = ""
    status_if_new: Optional[str] = None
    merge_fields: Optional[Dict[str, Any]] = None
    interests: Optional[Dict[str, bool]] = None
    language: str = ""
    vip: bool = False
    location: Optional[MemberLocation] = None
    marketing_permissions: Optional[List[MarketingPermission]] = None
    ip_opt: Optional[str] = None
    ip_signup: Optional[str] = None
    tags: Optional[List[MemberTag]] = None
    timestamp_signup: Optional[str] = None
    timestamp_opt: Optional[str] = None
    stats: MemberStats = Field(default_factory=MemberStats)
    member_rating: int = 0
    last_changed: str = ""
    email_client: str = ""
    last_note: MemberNoteShort = Field(default_factory=MemberNoteShort)


class ListOfMembers(BaseList):
    list_id: str = ""
    members: List[Member] = Field(default_factory=list)


class MemberActivity(MailchimpModel):
    action: str = ""
    timestamp: str = ""
    url: str = ""
    type: str = ""
    campaign_id: str = ""
    title: str = ""
    parent_campaign: str = ""


class ListOfMemberActivity(BaseList):
    email_id: str = ""
    list_id: str = ""
    activity: List[MemberActivity] = Field(default_factory=list)


class MemberGoal(MailchimpModel):
    goal_id: int = 0
    event: str = ""
    last_visited_at: str = ""
    data: str = ""


class ListOfMemberGoals(BaseList):
    email_id: str = ""
    list_id: str = ""
    goals: List[MemberGoal] = Field(default_factory=list)


class MemberNoteRequest(MailchimpModel):
    note: str = ""


class MemberNoteLong(WithLinks):
    id: int = 0
    created_at: str = ""
    created_by: str = ""
    updated_at: str = ""
    note: str = ""
    list_id: str = ""
    email_id: str = ""


class ListOfMemberNotes(BaseList):
    email_id: str = ""
    list_id: str = ""
    notes: List[MemberNoteLong] = Field(default_factory=list)


class UpdateMemberTag(MailchimpModel):
    name: str = ""
    status: str = ""  # active or inactive


class UpdateMemberTagsRequest(MailchimpModel):
    tags: List[UpdateMemberTag] = Field(default_factory=list)


class MemberTagLong(WithLinks):
    id: int = 0
    name: str = ""
    date_added: Optional[str] = None
    status: Optional[str] = None


class ListOfMemberTags(BaseList):
    tags: List[MemberTagLong] = Field(default_factory=list)


# --- Webhooks ---


class HookEvents(MailchimpModel):
    subscribe: bool = False
    unsubscribe: bool = False
    profile: bool = False
    cleaned: bool = False
    upemail: bool = False
    campaign: bool = False


class HookSources(MailchimpModel):
    user: bool = False
    admin: bool = False
    api: bool = False


class WebHookRequest(MailchimpModel):
    url: str = ""
    events: HookEvents = Field(default_factory=HookEvents)
    sources: HookSources = Field(default_factory=HookSources)


class WebHook(WebHookRequest):
    links: List[Link] = Field(default_factory=list, alias="_links")

    id: str = ""
    list_id: str = ""


class ListOfWebHooks(BaseList):
    list_id: str = ""
    webhooks: List[WebHook] = Field(default_factory=list)


# --- Templates ---


class TemplateCreationRequest(MailchimpModel):
    name: str = ""
    html: str = ""
    folder_id: Optional[str] = None


class TemplateResponse(WithLinks):
    id: int = 0
    type: str = ""
    name: str = ""
    drag_and_drop: bool = False
    responsive: bool = False
    category: str = ""
    date_created: str = ""
    date_edited: str = ""
    created_by: str = ""
    edited_by: str = ""
    active: bool = False
    folder_id: str = ""
    thumbnail: str = ""
    share_url: str = ""


class ListOfTemplates(BaseList):
    templates: List[TemplateResponse] = Field(default_factory=list)


class TemplateDefaultContentResponse(WithLinks):
    sections: Dict[str, str] = Field(default_factory=dict)

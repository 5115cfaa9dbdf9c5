import json
import os
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Type, Union
from urllib.parse import urlunsplit

import requests
from beartype import beartype
from loguru import logger
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from . import datatypes
from .errors import (
    APIError,
    AuthenticationError,
    EncodeError,
    ErrorDecodeError,
    ResponseDecodeError,
)
from .resources import (
    CampaignResource,
    ListResource,
    MemberResource,
    Page,
    TemplateResource,
)

# --- Endpoint Resolution ---

# Hostname template, filled with the datacenter suffix of the API key
URI_FORMAT = "{}.api.mailchimp.com"

# Path prefix of the API version this client speaks
API_VERSION = "/3.0"

# Trailing datacenter token of a key such as "0123abcd-us6"
DATACENTER_REGEX = re.compile(r"[^-]\w+$", re.ASCII)

# --- Path Templates ---

BATCHES_PATH = "/batches"
SINGLE_BATCH_PATH = BATCHES_PATH + "/{batch_id}"

CAMPAIGNS_PATH = "/campaigns"
SINGLE_CAMPAIGN_PATH = CAMPAIGNS_PATH + "/{campaign_id}"
CAMPAIGN_CONTENT_PATH = SINGLE_CAMPAIGN_PATH + "/content"
SEND_TEST_PATH = SINGLE_CAMPAIGN_PATH + "/actions/test"
SEND_PATH = SINGLE_CAMPAIGN_PATH + "/actions/send"
SCHEDULE_PATH = SINGLE_CAMPAIGN_PATH + "/actions/schedule"
UNSCHEDULE_PATH = SINGLE_CAMPAIGN_PATH + "/actions/unschedule"

CAMPAIGN_FOLDERS_PATH = "/campaign-folders"
SINGLE_CAMPAIGN_FOLDER_PATH = CAMPAIGN_FOLDERS_PATH + "/{folder_id}"

LISTS_PATH = "/lists"
SINGLE_LIST_PATH = LISTS_PATH + "/{list_id}"

TEMPLATES_PATH = "/templates"
SINGLE_TEMPLATE_PATH = TEMPLATES_PATH + "/{template_id}"
TEMPLATE_DEFAULT_CONTENT_PATH = SINGLE_TEMPLATE_PATH + "/default-content"

TEMPLATE_FOLDERS_PATH = "/template-folders"
SINGLE_TEMPLATE_FOLDER_PATH = TEMPLATE_FOLDERS_PATH + "/{folder_id}"

Timeout = Optional[Union[float, int]]


def _reject_json_constant(name: str) -> Any:
    raise ValueError(f"Out of range float value {name} is not JSON compliant")


@beartype
def datacenter_from_key(api_key: str) -> str:
    """
    Extract the datacenter suffix of an API key ("0123abcd-us6" -> "us6").

    The key format is not validated: a key without a recognizable suffix
    yields an empty string and the server will reject it later.
    """
    match = DATACENTER_REGEX.search(api_key)
    return match.group(0) if match else ""


@beartype
def resolve_endpoint(api_key: str) -> str:
    """Return the versioned base URL for the datacenter of `api_key`."""
    host = URI_FORMAT.format(datacenter_from_key(api_key))
    return urlunsplit(("https", host, API_VERSION, "", ""))


@beartype
class MailchimpAPI:
    """
    A Python client for the Mailchimp Marketing API v3.0.

    The official API documentation can be found at:
    https://mailchimp.com/developer/marketing/api/

    Configuration is fixed at construction. Only `debug` may be toggled
    afterwards, and it only affects logging. Without a `session`, each call
    goes through `requests.request` on its own connection, so one instance can
    be shared between threads. A caller-supplied session must itself be safe
    to share if the client is.

    Attributes:
        api_key (str): The API key, also used as the basic auth password.
        endpoint (str): Base URL, e.g. https://us6.api.mailchimp.com/3.0
        user (str): The basic auth user name.
        session (Optional[requests.Session]): The caller-supplied transport, or None.
        timeout (float): Default deadline of a call, in seconds.
        debug (bool): Whether requests and responses are logged.
    """

    # Version reflects the client library version, updated by bumpver
    VERSION: str = "0.1.0"

    DEFAULT_USER: str = "mailchimp_python_api"
    DEFAULT_TIMEOUT: float = 60.0

    def __init__(
        self,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        debug: Optional[bool] = None,
        timeout: Timeout = None,
        user: str = DEFAULT_USER,
    ):
        """
        Initialize the Mailchimp API client. No request is made.

        Args:
            api_key: Mailchimp API key of the form '<key>-<datacenter>'.
                     Defaults to MAILCHIMP_PYTHON_API_KEY environment variable if not provided.
            session: A requests.Session to send requests with. Connection pooling,
                     proxies and TLS settings are taken from it. If None, every call uses
                     `requests.request` with a fresh connection.
            debug: Log every request and response. If None (default), reads from
                   MAILCHIMP_PYTHON_API_DEBUG environment variable.
            timeout: Default per-call timeout in seconds. If None, reads from
                     MAILCHIMP_PYTHON_API_TIMEOUT, falling back to 60 seconds.
            user: User name sent with basic auth. Mailchimp accepts any value.
        """
        # --- Debug Setting ---
        if debug is None:
            env_debug = os.environ.get("MAILCHIMP_PYTHON_API_DEBUG", "").lower()
            self.debug = env_debug in ("true", "1", "yes")
        else:
            self.debug = debug

        # --- API Key Validation ---
        resolved_api_key = api_key or os.environ.get("MAILCHIMP_PYTHON_API_KEY")
        if not resolved_api_key:
            raise ValueError(
                "API Key is required. Provide 'api_key' argument or set MAILCHIMP_PYTHON_API_KEY environment variable."
            )
        self._api_key = resolved_api_key

        # --- Timeout Setting ---
        # Argument takes precedence over environment variable
        env_timeout_str = os.environ.get("MAILCHIMP_PYTHON_API_TIMEOUT")
        if timeout is not None:
            self._timeout = float(timeout)
        elif env_timeout_str is not None:
            try:
                self._timeout = float(env_timeout_str)
            except ValueError:
                self._timeout = self.DEFAULT_TIMEOUT
                logger.warning(
                    f"Invalid value for MAILCHIMP_PYTHON_API_TIMEOUT ('{env_timeout_str}'). Using {self.DEFAULT_TIMEOUT}s."
                )
        else:
            self._timeout = self.DEFAULT_TIMEOUT

        self._user = user
        self._endpoint = resolve_endpoint(self._api_key)
        self._session = session

        if self.debug:
            logger.debug("MailchimpAPI client initialized.")
            logger.debug(f"  Endpoint: {self._endpoint}")
            logger.debug(f"  User: {self._user}")
            logger.debug(f"  Timeout: {self._timeout}s")
            # API Key is intentionally not logged for security

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def user(self) -> str:
        return self._user

    @property
    def session(self) -> Optional[requests.Session]:
        return self._session

    @property
    def timeout(self) -> float:
        return self._timeout

    # --- Request Pipeline ---

    def _encode_body(self, body: Union[BaseModel, Dict[str, Any], List[Any]]) -> bytes:
        """
        Serialize a request body to JSON bytes, raising EncodeError on failure.
        NaN and Infinity are rejected since they are not valid JSON.
        """
        try:
            if isinstance(body, BaseModel):
                encoded = body.model_dump_json(by_alias=True, exclude_none=True)
                json.loads(encoded, parse_constant=_reject_json_constant)
            else:
                encoded = json.dumps(body, ensure_ascii=False, allow_nan=False)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodeError(f"Failed to JSON encode request body: {e}") from e
        return encoded.encode("utf-8")

    def _raise_api_error(self, response: requests.Response) -> None:
        """Decode a non-2xx response body into an APIError and raise it."""
        try:
            payload = json.loads(response.content)
        except ValueError as e:
            raise ErrorDecodeError(
                f"Failed to decode API error body: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e
        if not isinstance(payload, dict):
            raise ErrorDecodeError(
                "API error body is not a JSON object",
                status_code=response.status_code,
                body=response.text,
            )

        status = payload.get("status")
        errors = payload.get("errors")
        error_class = AuthenticationError if response.status_code == 401 else APIError
        raise error_class(
            status=status if isinstance(status, int) and status else response.status_code,
            title=str(payload.get("title") or ""),
            detail=str(payload.get("detail") or ""),
            type=str(payload.get("type") or ""),
            instance=str(payload.get("instance") or ""),
            errors=errors if isinstance(errors, list) else None,
        )

    def _call(
        self,
        method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"],
        path: str,
        params: Optional[datatypes.QueryParams] = None,
        body: Optional[Union[BaseModel, Dict[str, Any], List[Any]]] = None,
        response_model: Optional[Type[BaseModel]] = None,
        timeout: Timeout = None,
    ) -> Optional[BaseModel]:
        """
        Internal method to make an HTTP call to the Mailchimp API. Handles authentication,
        request encoding, response decoding, and error handling.

        Args:
            method: HTTP method ('GET', 'POST', 'PUT', 'PATCH', 'DELETE').
            path: API path relative to the endpoint, starting with '/' (e.g. '/lists/abc123').
            params: Query parameters. Empty values returned by `to_params` are not sent.
            body: Request body, a pydantic model (dumped by alias, without None values) or a dict/list.
            response_model: Model to decode a successful response into. If None, the body is ignored.
            timeout: Deadline in seconds for this call. Defaults to the client timeout.

        Returns:
            An instance of `response_model`, or None if no model was requested.
            An empty 2xx body yields a default instance of `response_model`.

        Raises:
            EncodeError: If the body cannot be serialized. Nothing is sent.
            requests.exceptions.RequestException: Transport failures and timeouts, unmodified.
            ResponseDecodeError: If a 2xx body does not match `response_model`.
            AuthenticationError: For 401 responses.
            APIError: For other non-2xx responses.
            ErrorDecodeError: If a non-2xx body is not a problem-details JSON object.
        """
        url = f"{self._endpoint}{path}"

        request_body: Optional[bytes] = None
        if body is not None:
            request_body = self._encode_body(body)

        query: Optional[Dict[str, str]] = None
        if params is not None:
            query = {k: v for k, v in params.to_params().items() if v != ""}

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"MailchimpPythonAPI/{self.VERSION}",
        }
        effective_timeout = self._timeout if timeout is None else timeout

        if self.debug:
            logger.debug(f"API Request:")
            logger.debug(f"  Method: {method}")
            logger.debug(f"  URL: {url}")
            logger.debug(f"  Params: {query}")
            logger.debug(f"  Headers: {headers}")
            logger.debug(f"  Auth: Basic {self._user}:...")
            log_body_display = "None"
            if request_body:
                log_body_display = request_body.decode("utf-8", errors="replace")
            # Truncate long bodies for logging
            if len(log_body_display) > 500:
                log_body_display = log_body_display[:500] + "...(truncated)"
            logger.debug(f"  Body: {log_body_display}")

        sender = requests if self._session is None else self._session
        response = sender.request(
            method=method,
            url=url,
            params=query,
            data=request_body,
            headers=headers,
            auth=(self._user, self._api_key),
            timeout=effective_timeout,
        )

        if self.debug:
            logger.debug(f"API Response:")
            logger.debug(f"  Status Code: {response.status_code}")
            logger.debug(f"  Headers: {dict(response.headers)}")
            log_resp_str = response.text
            if len(log_resp_str) > 1000:
                log_resp_str = log_resp_str[:1000] + "...(truncated)"
            logger.debug(f"  Body: {log_resp_str}")

        if not 200 <= response.status_code < 300:
            self._raise_api_error(response)

        if response_model is None:
            return None
        if not response.content:
            return response_model()

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"Failed to decode response from {method} {url} as {response_model.__name__}: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def _call_ok(
        self,
        method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"],
        path: str,
        body: Optional[Union[BaseModel, Dict[str, Any], List[Any]]] = None,
        timeout: Timeout = None,
    ) -> bool:
        """
        Make a call ignoring the response body. Returns True on any 2xx status;
        every failure raises exactly as `_call` does.
        """
        self._call(method, path, body=body, timeout=timeout)
        return True

    # --- Root ---

    @beartype
    def get_root(
        self,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.RootResponse:
        """
        Get account details. Corresponds to GET /.

        Args:
            params: Optional fields/exclude_fields selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.RootResponse: Details about the account owning the API key.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "GET",
            "/",
            params=params,
            response_model=datatypes.RootResponse,
            timeout=timeout,
        )

    # --- Batches ---

    @beartype
    def get_batch_operations(
        self,
        params: Optional[datatypes.ExtendedQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.ListOfBatchOperations:
        """
        List batch operation requests. Corresponds to GET /batches.

        Args:
            params: Paging and field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfBatchOperations: One page of batch statuses.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "GET",
            BATCHES_PATH,
            params=params,
            response_model=datatypes.ListOfBatchOperations,
            timeout=timeout,
        )

    @beartype
    def get_batch_operation(
        self,
        batch_id: str,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.BatchOperationResponse:
        """
        Get the status of a batch request. Corresponds to GET /batches/{batch_id}.

        Args:
            batch_id: The ID of the batch operation.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.BatchOperationResponse: The batch status.

        Raises:
            APIError: If the API request fails (e.g., 404 batch not found).
        """
        return self._call(
            "GET",
            SINGLE_BATCH_PATH.format(batch_id=batch_id),
            params=params,
            response_model=datatypes.BatchOperationResponse,
            timeout=timeout,
        )

    @beartype
    def create_batch_operation(
        self,
        body: datatypes.BatchOperationCreationRequest,
        timeout: Timeout = None,
    ) -> datatypes.BatchOperationResponse:
        """
        Start a batch operation. Corresponds to POST /batches.

        Args:
            body: The operations to run. Each operation body is a JSON encoded string.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.BatchOperationResponse: The pending batch.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "POST",
            BATCHES_PATH,
            body=body,
            response_model=datatypes.BatchOperationResponse,
            timeout=timeout,
        )

    @beartype
    def delete_batch_operation(self, batch_id: str, timeout: Timeout = None) -> bool:
        """
        Stop a batch request from running. Corresponds to DELETE /batches/{batch_id}.

        Args:
            batch_id: The ID of the batch operation.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails.
        """
        return self._call_ok(
            "DELETE", SINGLE_BATCH_PATH.format(batch_id=batch_id), timeout=timeout
        )

    # --- Campaigns ---

    @beartype
    def campaign_handle(self, campaign_id: str) -> CampaignResource:
        """
        Build a handle for a campaign without fetching it.

        Args:
            campaign_id: The ID of the campaign.

        Returns:
            CampaignResource: A handle with no data attached.

        Raises:
            Nothing, no request is made.
        """
        return CampaignResource(self, campaign_id)

    @beartype
    def get_campaigns(
        self,
        params: Optional[datatypes.CampaignQueryParams] = None,
        timeout: Timeout = None,
    ) -> Page[CampaignResource]:
        """
        List campaigns. Corresponds to GET /campaigns.

        Args:
            params: Paging, filters (type, status, send/create time ranges, list, folder) and sorting.
            timeout: Deadline in seconds for this call.

        Returns:
            Page[CampaignResource]: One page of campaign handles.

        Raises:
            APIError: If the API request fails.
        """
        response = self._call(
            "GET",
            CAMPAIGNS_PATH,
            params=params,
            response_model=datatypes.ListOfCampaigns,
            timeout=timeout,
        )
        return Page(
            response,
            [CampaignResource.from_response(self, c) for c in response.campaigns],
        )

    @beartype
    def get_campaign(
        self,
        campaign_id: str,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> CampaignResource:
        """
        Get a single campaign. Corresponds to GET /campaigns/{campaign_id}.

        Args:
            campaign_id: The ID of the campaign.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            CampaignResource: The campaign.

        Raises:
            APIError: If the API request fails (e.g., 404 campaign not found).
        """
        response = self._call(
            "GET",
            SINGLE_CAMPAIGN_PATH.format(campaign_id=campaign_id),
            params=params,
            response_model=datatypes.CampaignResponse,
            timeout=timeout,
        )
        return CampaignResource.from_response(self, response)

    @beartype
    def create_campaign(
        self,
        body: datatypes.CampaignCreationRequest,
        timeout: Timeout = None,
    ) -> CampaignResource:
        """
        Create a new campaign. Corresponds to POST /campaigns.

        Args:
            body: Type, recipients, settings and tracking of the campaign.
            timeout: Deadline in seconds for this call.

        Returns:
            CampaignResource: The created campaign.

        Raises:
            APIError: If the API request fails (e.g., invalid settings).
        """
        response = self._call(
            "POST",
            CAMPAIGNS_PATH,
            body=body,
            response_model=datatypes.CampaignResponse,
            timeout=timeout,
        )
        return CampaignResource.from_response(self, response)

    @beartype
    def update_campaign(
        self,
        campaign_id: str,
        body: datatypes.CampaignCreationRequest,
        timeout: Timeout = None,
    ) -> CampaignResource:
        """
        Update a campaign's settings. Corresponds to PATCH /campaigns/{campaign_id}.

        Args:
            campaign_id: The ID of the campaign.
            body: The new campaign settings.
            timeout: Deadline in seconds for this call.

        Returns:
            CampaignResource: The updated campaign.

        Raises:
            APIError: If the API request fails.
        """
        response = self._call(
            "PATCH",
            SINGLE_CAMPAIGN_PATH.format(campaign_id=campaign_id),
            body=body,
            response_model=datatypes.CampaignResponse,
            timeout=timeout,
        )
        return CampaignResource.from_response(self, response)

    @beartype
    def delete_campaign(self, campaign_id: str, timeout: Timeout = None) -> bool:
        """
        Delete a campaign. Corresponds to DELETE /campaigns/{campaign_id}.

        Args:
            campaign_id: The ID of the campaign.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success (204 No Content).

        Raises:
            APIError: If the API request fails (e.g., 404 campaign not found).
        """
        return self._call_ok(
            "DELETE",
            SINGLE_CAMPAIGN_PATH.format(campaign_id=campaign_id),
            timeout=timeout,
        )

    @beartype
    def get_campaign_content(
        self,
        campaign_id: str,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.CampaignContentResponse:
        """
        Get the HTML and plain-text content of a campaign. Corresponds to GET /campaigns/{campaign_id}/content.

        Args:
            campaign_id: The ID of the campaign.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.CampaignContentResponse: The campaign content.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "GET",
            CAMPAIGN_CONTENT_PATH.format(campaign_id=campaign_id),
            params=params,
            response_model=datatypes.CampaignContentResponse,
            timeout=timeout,
        )

    @beartype
    def update_campaign_content(
        self,
        campaign_id: str,
        body: datatypes.CampaignContentUpdateRequest,
        timeout: Timeout = None,
    ) -> datatypes.CampaignContentResponse:
        """
        Set the content of a campaign. Corresponds to PUT /campaigns/{campaign_id}/content.

        Args:
            campaign_id: The ID of the campaign.
            body: Plain text, HTML, URL or template based content.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.CampaignContentResponse: The stored content.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "PUT",
            CAMPAIGN_CONTENT_PATH.format(campaign_id=campaign_id),
            body=body,
            response_model=datatypes.CampaignContentResponse,
            timeout=timeout,
        )

    @beartype
    def send_campaign(
        self,
        campaign_id: str,
        body: Optional[datatypes.SendCampaignRequest] = None,
        timeout: Timeout = None,
    ) -> bool:
        """
        Send a campaign now. Corresponds to POST /campaigns/{campaign_id}/actions/send.

        Args:
            campaign_id: The ID of the campaign.
            body: Optional request body.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True once the campaign is accepted for sending.

        Raises:
            APIError: If the API request fails (e.g., campaign not ready to send).
        """
        return self._call_ok(
            "POST",
            SEND_PATH.format(campaign_id=campaign_id),
            body=body,
            timeout=timeout,
        )

    @beartype
    def send_test_email(
        self,
        campaign_id: str,
        body: datatypes.TestEmailRequest,
        timeout: Timeout = None,
    ) -> bool:
        """
        Send a test email. Corresponds to POST /campaigns/{campaign_id}/actions/test.

        Args:
            campaign_id: The ID of the campaign.
            body: The test recipients and the send type (html or plaintext).
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails.
        """
        return self._call_ok(
            "POST",
            SEND_TEST_PATH.format(campaign_id=campaign_id),
            body=body,
            timeout=timeout,
        )

    @beartype
    def schedule_campaign(
        self,
        campaign_id: str,
        schedule_time: datetime,
        timeout: Timeout = None,
    ) -> bool:
        """
        Schedule a campaign for delivery. Corresponds to POST /campaigns/{campaign_id}/actions/schedule.
        Campaigns may only be scheduled to send on the quarter-hour (:00, :15, :30, :45).

        Args:
            campaign_id: The ID of the campaign.
            schedule_time: When to send. Naive datetimes are taken as UTC.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails (e.g., time not on the quarter-hour).
        """
        if schedule_time.tzinfo is None:
            schedule_time = schedule_time.replace(tzinfo=timezone.utc)
        body = datatypes.ScheduleCampaignRequest(
            schedule_time=schedule_time.astimezone(timezone.utc)
            .isoformat(timespec="seconds")
            .replace("+00:00", "Z")
        )
        return self._call_ok(
            "POST",
            SCHEDULE_PATH.format(campaign_id=campaign_id),
            body=body,
            timeout=timeout,
        )

    @beartype
    def unschedule_campaign(self, campaign_id: str, timeout: Timeout = None) -> bool:
        """
        Unschedule a scheduled campaign. Corresponds to POST /campaigns/{campaign_id}/actions/unschedule.

        Args:
            campaign_id: The ID of the campaign.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails.
        """
        return self._call_ok(
            "POST", UNSCHEDULE_PATH.format(campaign_id=campaign_id), timeout=timeout
        )

    # --- Campaign Folders ---

    @beartype
    def get_campaign_folders(
        self,
        params: Optional[datatypes.CampaignFolderQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.ListOfCampaignFolders:
        """
        List campaign folders. Corresponds to GET /campaign-folders.

        Args:
            params: Paging and field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfCampaignFolders: One page of folders.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "GET",
            CAMPAIGN_FOLDERS_PATH,
            params=params,
            response_model=datatypes.ListOfCampaignFolders,
            timeout=timeout,
        )

    @beartype
    def get_campaign_folder(
        self,
        folder_id: str,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.CampaignFolder:
        """
        Get a campaign folder. Corresponds to GET /campaign-folders/{folder_id}.

        Args:
            folder_id: The ID of the folder.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.CampaignFolder: The folder.

        Raises:
            APIError: If the API request fails (e.g., 404 folder not found).
        """
        return self._call(
            "GET",
            SINGLE_CAMPAIGN_FOLDER_PATH.format(folder_id=folder_id),
            params=params,
            response_model=datatypes.CampaignFolder,
            timeout=timeout,
        )

    @beartype
    def create_campaign_folder(
        self,
        body: datatypes.CampaignFolderCreationRequest,
        timeout: Timeout = None,
    ) -> datatypes.CampaignFolder:
        """
        Create a campaign folder. Corresponds to POST /campaign-folders.

        Args:
            body: The folder name.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.CampaignFolder: The created folder.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "POST",
            CAMPAIGN_FOLDERS_PATH,
            body=body,
            response_model=datatypes.CampaignFolder,
            timeout=timeout,
        )

    @beartype
    def update_campaign_folder(
        self,
        folder_id: str,
        body: datatypes.CampaignFolderCreationRequest,
        timeout: Timeout = None,
    ) -> datatypes.CampaignFolder:
        """
        Rename a campaign folder. Corresponds to PATCH /campaign-folders/{folder_id}.

        Args:
            folder_id: The ID of the folder.
            body: The new folder name.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.CampaignFolder: The updated folder.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "PATCH",
            SINGLE_CAMPAIGN_FOLDER_PATH.format(folder_id=folder_id),
            body=body,
            response_model=datatypes.CampaignFolder,
            timeout=timeout,
        )

    @beartype
    def delete_campaign_folder(self, folder_id: str, timeout: Timeout = None) -> bool:
        """
        Delete a campaign folder. Its campaigns are moved out, not deleted.
        Corresponds to DELETE /campaign-folders/{folder_id}.

        Args:
            folder_id: The ID of the folder.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails.
        """
        return self._call_ok(
            "DELETE",
            SINGLE_CAMPAIGN_FOLDER_PATH.format(folder_id=folder_id),
            timeout=timeout,
        )

    # --- Lists ---

    @beartype
    def list_handle(self, list_id: str) -> ListResource:
        """
        Build a handle for a list without fetching it. Use it to reach the
        list's members and webhooks directly.

        Args:
            list_id: The ID of the list.

        Returns:
            ListResource: A handle with no data attached.

        Raises:
            Nothing, no request is made.
        """
        return ListResource(self, list_id)

    @beartype
    def member_handle(
        self,
        list_id: str,
        email: Optional[str] = None,
        member_id: Optional[str] = None,
    ) -> MemberResource:
        """
        Build a handle for a list member without fetching anything. The member ID
        is derived from `email` when `member_id` is empty.

        Args:
            list_id: The ID of the list.
            email: The member's email address.
            member_id: The member's subscriber hash.

        Returns:
            MemberResource: A handle ready for member level calls.

        Raises:
            MissingIdentifierError: If neither email nor member_id is given.
        """
        return self.list_handle(list_id).member(email=email, member_id=member_id)

    @beartype
    def get_lists(
        self,
        params: Optional[datatypes.ListQueryParams] = None,
        timeout: Timeout = None,
    ) -> Page[ListResource]:
        """
        List the account's lists (audiences). Corresponds to GET /lists.

        Args:
            params: Paging, creation/last-sent date filters and email lookup.
            timeout: Deadline in seconds for this call.

        Returns:
            Page[ListResource]: One page of list handles.

        Raises:
            APIError: If the API request fails.
        """
        response = self._call(
            "GET",
            LISTS_PATH,
            params=params,
            response_model=datatypes.ListOfLists,
            timeout=timeout,
        )
        return Page(
            response, [ListResource.from_response(self, lst) for lst in response.lists]
        )

    @beartype
    def get_list(
        self,
        list_id: str,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> ListResource:
        """
        Get a single list. Corresponds to GET /lists/{list_id}.

        Args:
            list_id: The ID of the list.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            ListResource: The list.

        Raises:
            APIError: If the API request fails (e.g., 404 list not found).
        """
        response = self._call(
            "GET",
            SINGLE_LIST_PATH.format(list_id=list_id),
            params=params,
            response_model=datatypes.ListResponse,
            timeout=timeout,
        )
        return ListResource.from_response(self, response)

    @beartype
    def create_list(
        self,
        body: datatypes.ListCreationRequest,
        timeout: Timeout = None,
    ) -> ListResource:
        """
        Create a new list. Corresponds to POST /lists.

        Args:
            body: Name, contact, permission reminder and campaign defaults.
            timeout: Deadline in seconds for this call.

        Returns:
            ListResource: The created list.

        Raises:
            APIError: If the API request fails.
        """
        response = self._call(
            "POST",
            LISTS_PATH,
            body=body,
            response_model=datatypes.ListResponse,
            timeout=timeout,
        )
        return ListResource.from_response(self, response)

    @beartype
    def update_list(
        self,
        list_id: str,
        body: datatypes.ListCreationRequest,
        timeout: Timeout = None,
    ) -> ListResource:
        """
        Update a list's settings. Corresponds to PATCH /lists/{list_id}.

        Args:
            list_id: The ID of the list.
            body: The new list settings.
            timeout: Deadline in seconds for this call.

        Returns:
            ListResource: The updated list.

        Raises:
            APIError: If the API request fails.
        """
        response = self._call(
            "PATCH",
            SINGLE_LIST_PATH.format(list_id=list_id),
            body=body,
            response_model=datatypes.ListResponse,
            timeout=timeout,
        )
        return ListResource.from_response(self, response)

    @beartype
    def delete_list(self, list_id: str, timeout: Timeout = None) -> bool:
        """
        Delete a list and all its members. Corresponds to DELETE /lists/{list_id}.

        Args:
            list_id: The ID of the list.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails.
        """
        return self._call_ok(
            "DELETE", SINGLE_LIST_PATH.format(list_id=list_id), timeout=timeout
        )

    @beartype
    def list_get_members(
        self,
        list_id: str,
        params: Optional[datatypes.MemberQueryParams] = None,
        timeout: Timeout = None,
    ) -> Page[MemberResource]:
        """
        List the members of a list. Corresponds to GET /lists/{list_id}/members.

        Args:
            list_id: The ID of the list.
            params: Paging and member filters.
            timeout: Deadline in seconds for this call.

        Returns:
            Page[MemberResource]: One page of member handles.

        Raises:
            MissingIdentifierError: If list_id is empty.
            APIError: If the API request fails.
        """
        return self.list_handle(list_id).get_members(params=params, timeout=timeout)

    @beartype
    def list_add_or_update_member(
        self,
        list_id: str,
        body: datatypes.MemberRequest,
        member_id: Optional[str] = None,
        timeout: Timeout = None,
    ) -> MemberResource:
        """
        Add or update a list member. Corresponds to PUT /lists/{list_id}/members/{subscriber_hash}.

        Args:
            list_id: The ID of the list.
            body: The member data.
            member_id: The subscriber hash. Derived from body.email_address when omitted.
            timeout: Deadline in seconds for this call.

        Returns:
            MemberResource: The stored member.

        Raises:
            MissingIdentifierError: If list_id is empty, or neither member_id nor an email address is given.
            APIError: If the API request fails.
        """
        return self.list_handle(list_id).add_or_update_member(
            member_id, body, timeout=timeout
        )

    # --- Templates ---

    @beartype
    def template_handle(self, template_id: Union[int, str]) -> TemplateResource:
        """
        Build a handle for a template without fetching it.

        Args:
            template_id: The ID of the template.

        Returns:
            TemplateResource: A handle with no data attached.

        Raises:
            Nothing, no request is made.
        """
        return TemplateResource(self, template_id)

    @beartype
    def get_templates(
        self,
        params: Optional[datatypes.TemplateQueryParams] = None,
        timeout: Timeout = None,
    ) -> Page[TemplateResource]:
        """
        List templates. Corresponds to GET /templates.

        Args:
            params: Paging, creator/date/type/category/folder filters.
            timeout: Deadline in seconds for this call.

        Returns:
            Page[TemplateResource]: One page of template handles.

        Raises:
            APIError: If the API request fails.
        """
        response = self._call(
            "GET",
            TEMPLATES_PATH,
            params=params,
            response_model=datatypes.ListOfTemplates,
            timeout=timeout,
        )
        return Page(
            response,
            [TemplateResource.from_response(self, t) for t in response.templates],
        )

    @beartype
    def get_template(
        self,
        template_id: Union[int, str],
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> TemplateResource:
        """
        Get a single template. Corresponds to GET /templates/{template_id}.

        Args:
            template_id: The ID of the template.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            TemplateResource: The template.

        Raises:
            APIError: If the API request fails (e.g., 404 template not found).
        """
        response = self._call(
            "GET",
            SINGLE_TEMPLATE_PATH.format(template_id=template_id),
            params=params,
            response_model=datatypes.TemplateResponse,
            timeout=timeout,
        )
        return TemplateResource.from_response(self, response)

    @beartype
    def create_template(
        self,
        body: datatypes.TemplateCreationRequest,
        timeout: Timeout = None,
    ) -> TemplateResource:
        """
        Create a new template. Corresponds to POST /templates.

        Args:
            body: Name, HTML and optional folder of the template.
            timeout: Deadline in seconds for this call.

        Returns:
            TemplateResource: The created template.

        Raises:
            APIError: If the API request fails.
        """
        response = self._call(
            "POST",
            TEMPLATES_PATH,
            body=body,
            response_model=datatypes.TemplateResponse,
            timeout=timeout,
        )
        return TemplateResource.from_response(self, response)

    @beartype
    def update_template(
        self,
        template_id: Union[int, str],
        body: datatypes.TemplateCreationRequest,
        timeout: Timeout = None,
    ) -> TemplateResource:
        """
        Update a template. Corresponds to PATCH /templates/{template_id}.

        Args:
            template_id: The ID of the template.
            body: The new name, HTML or folder.
            timeout: Deadline in seconds for this call.

        Returns:
            TemplateResource: The updated template.

        Raises:
            APIError: If the API request fails.
        """
        response = self._call(
            "PATCH",
            SINGLE_TEMPLATE_PATH.format(template_id=template_id),
            body=body,
            response_model=datatypes.TemplateResponse,
            timeout=timeout,
        )
        return TemplateResource.from_response(self, response)

    @beartype
    def delete_template(
        self, template_id: Union[int, str], timeout: Timeout = None
    ) -> bool:
        """
        Delete a template. Corresponds to DELETE /templates/{template_id}.

        Args:
            template_id: The ID of the template.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails.
        """
        return self._call_ok(
            "DELETE",
            SINGLE_TEMPLATE_PATH.format(template_id=template_id),
            timeout=timeout,
        )

    @beartype
    def get_template_default_content(
        self,
        template_id: Union[int, str],
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.TemplateDefaultContentResponse:
        """
        Get the editable sections of a template. Corresponds to GET /templates/{template_id}/default-content.

        Args:
            template_id: The ID of the template.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.TemplateDefaultContentResponse: Section name to default content.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "GET",
            TEMPLATE_DEFAULT_CONTENT_PATH.format(template_id=template_id),
            params=params,
            response_model=datatypes.TemplateDefaultContentResponse,
            timeout=timeout,
        )

    # --- Template Folders ---

    @beartype
    def get_template_folders(
        self,
        params: Optional[datatypes.TemplateFolderQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.ListOfTemplateFolders:
        """
        List template folders. Corresponds to GET /template-folders.

        Args:
            params: Paging and field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.ListOfTemplateFolders: One page of folders.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "GET",
            TEMPLATE_FOLDERS_PATH,
            params=params,
            response_model=datatypes.ListOfTemplateFolders,
            timeout=timeout,
        )

    @beartype
    def get_template_folder(
        self,
        folder_id: str,
        params: Optional[datatypes.BasicQueryParams] = None,
        timeout: Timeout = None,
    ) -> datatypes.TemplateFolder:
        """
        Get a template folder. Corresponds to GET /template-folders/{folder_id}.

        Args:
            folder_id: The ID of the folder.
            params: Optional field selection.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.TemplateFolder: The folder.

        Raises:
            APIError: If the API request fails (e.g., 404 folder not found).
        """
        return self._call(
            "GET",
            SINGLE_TEMPLATE_FOLDER_PATH.format(folder_id=folder_id),
            params=params,
            response_model=datatypes.TemplateFolder,
            timeout=timeout,
        )

    @beartype
    def create_template_folder(
        self,
        body: datatypes.TemplateFolderCreationRequest,
        timeout: Timeout = None,
    ) -> datatypes.TemplateFolder:
        """
        Create a template folder. Corresponds to POST /template-folders.

        Args:
            body: The folder name.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.TemplateFolder: The created folder.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "POST",
            TEMPLATE_FOLDERS_PATH,
            body=body,
            response_model=datatypes.TemplateFolder,
            timeout=timeout,
        )

    @beartype
    def update_template_folder(
        self,
        folder_id: str,
        body: datatypes.TemplateFolderCreationRequest,
        timeout: Timeout = None,
    ) -> datatypes.TemplateFolder:
        """
        Rename a template folder. Corresponds to PATCH /template-folders/{folder_id}.

        Args:
            folder_id: The ID of the folder.
            body: The new folder name.
            timeout: Deadline in seconds for this call.

        Returns:
            datatypes.TemplateFolder: The updated folder.

        Raises:
            APIError: If the API request fails.
        """
        return self._call(
            "PATCH",
            SINGLE_TEMPLATE_FOLDER_PATH.format(folder_id=folder_id),
            body=body,
            response_model=datatypes.TemplateFolder,
            timeout=timeout,
        )

    @beartype
    def delete_template_folder(self, folder_id: str, timeout: Timeout = None) -> bool:
        """
        Delete a template folder. Its templates are moved out, not deleted.
        Corresponds to DELETE /template-folders/{folder_id}.

        Args:
            folder_id: The ID of the folder.
            timeout: Deadline in seconds for this call.

        Returns:
            bool: True on success.

        Raises:
            APIError: If the API request fails.
        """
        return self._call_ok(
            "DELETE",
            SINGLE_TEMPLATE_FOLDER_PATH.format(folder_id=folder_id),
            timeout=timeout,
        )

"""boto3 adapters paging through Lambda functions and CloudWatch log events"""

import logging
from typing import Any, Callable

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from lambdalog.errors import FetchError
from lambdalog.models.account import AccountContext
from lambdalog.models.cached_list import Page, PageFetcher
from lambdalog.models.date_range import DateRange
from lambdalog.models.log_event import LogEvent, to_epoch_millis

logger = logging.getLogger(__name__)

EVENTS_PAGE_LIMIT = 100

SessionFactory = Callable[[AccountContext], Any]

_AWS_ERRORS = (BotoCoreError, ClientError)


def create_session(context: AccountContext) -> boto3.Session:
    """Create a boto3 session for the profile and region of a context"""
    return boto3.Session(profile_name=context.name, region_name=context.region)


def log_group_name(function_name: str) -> str:
    """Get the CloudWatch log group of a Lambda function"""
    return f"/aws/lambda/{function_name}"


class _AwsFetcher:  # pylint: disable=too-few-public-methods
    def __init__(self, session_factory: SessionFactory = create_session) -> None:
        self._session_factory = session_factory

    def _client(self, context: AccountContext, service: str, what: str) -> Any:
        try:
            return self._session_factory(context).client(service)
        except _AWS_ERRORS as e:
            raise FetchError(what, str(e)) from e


class FunctionLister(_AwsFetcher):  # pylint: disable=too-few-public-methods
    """Lists the Lambda function names of an account context"""

    def __call__(self, context: AccountContext) -> PageFetcher[str]:
        client = self._client(context, "lambda", "Lambda functions")

        def fetch_page(marker: str | None) -> Page[str]:
            kwargs = {"Marker": marker} if marker is not None else {}
            try:
                response = client.list_functions(**kwargs)
            except _AWS_ERRORS as e:
                raise FetchError("Lambda functions", str(e)) from e
            names = [
                function["FunctionName"]
                for function in response.get("Functions", [])
                if function.get("FunctionName")
            ]
            logger.debug("Listed %d functions", len(names))
            return Page(names, response.get("NextMarker"))

        return fetch_page


class LogEventFetcher(_AwsFetcher):  # pylint: disable=too-few-public-methods
    """Fetches the log events of a function within a date range"""

    def __call__(
        self, context: AccountContext, function_name: str, date_range: DateRange
    ) -> PageFetcher[LogEvent]:
        what = f"log events of {function_name}"
        client = self._client(context, "logs", what)
        request = {
            "logGroupName": log_group_name(function_name),
            "startTime": to_epoch_millis(date_range.from_date),
            "endTime": to_epoch_millis(date_range.to_date),
            "limit": EVENTS_PAGE_LIMIT,
        }

        def fetch_page(token: str | None) -> Page[LogEvent]:
            kwargs = request | ({"nextToken": token} if token is not None else {})
            try:
                response = client.filter_log_events(**kwargs)
            except _AWS_ERRORS as e:
                raise FetchError(what, str(e)) from e
            events = [LogEvent.from_api(event) for event in response.get("events", [])]
            logger.debug("Fetched %d events", len(events))
            return Page(events, response.get("nextToken"))

        return fetch_page

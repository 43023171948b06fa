"""
Page Data Resolver
Resolves dotted data paths inside page fixtures.

The contract is strict: every segment of a path must exist as a key of a
mapping, otherwise DataPathNotFoundError is raised. There is no default and
no best-effort partial result, so fixture drift fails the test loudly.

    resolver.resolve("login", "selectors.usernameInput")
    resolver.get_timeout("dashboard", "pageLoad")
"""

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from ..errors import DataPathNotFoundError, InvalidFixtureValueError, RecordNotFoundError
from ..models import FixtureRecord, UserRecord
from .fixture_store import FixtureStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=FixtureRecord)

LOGIN_PAGE = "login"


class PageDataResolver:
    """Typed, fail-fast access to fixture data"""

    def __init__(self, fixture_store: FixtureStore):
        self.fixture_store = fixture_store

    def get_page_data(self, page_name: str) -> Dict[str, Any]:
        """A copy of the whole fixture document of a page"""
        return copy.deepcopy(self.fixture_store.load(page_name))

    def resolve(self, page_name: str, path: str) -> Any:
        """
        Walk a dotted path from the root of a page fixture.

        Returns a copy of the nested value, so callers cannot change the
        cached fixture. None, 0, "" and False are values, not "not found".

        Raises:
            FixtureNotFoundError: the page has no fixture
            DataPathNotFoundError: any segment is missing
        """
        node: Any = self.fixture_store.load(page_name)

        for segment in path.split("."):
            if not segment or not isinstance(node, Mapping) or segment not in node:
                raise DataPathNotFoundError(page_name, path)
            node = node[segment]

        return copy.deepcopy(node)

    # ==================== TYPED ACCESSORS ====================

    def get_selector(self, page_name: str, selector_name: str) -> str:
        return self.resolve(page_name, f"selectors.{selector_name}")

    def get_selectors(self, page_name: str) -> Dict[str, str]:
        selectors = self.resolve(page_name, "selectors")
        if not isinstance(selectors, Mapping):
            raise DataPathNotFoundError(page_name, "selectors")
        return dict(selectors)

    def get_expected_text(self, page_name: str, text_name: str) -> str:
        return self.resolve(page_name, f"expectedTexts.{text_name}")

    def get_url(self, page_name: str, url_name: str) -> str:
        return self.resolve(page_name, f"urls.{url_name}")

    def get_timeout(self, page_name: str, timeout_name: str) -> int:
        """Timeout in whole milliseconds; 1500.0 is accepted, 1500.7 is not"""
        path = f"timeouts.{timeout_name}"
        value = self.resolve(page_name, path)
        is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
        if not is_number or (isinstance(value, float) and not value.is_integer()):
            raise InvalidFixtureValueError(page_name, path, value, "a whole number of milliseconds")
        return int(value)

    # ==================== DOMAIN RECORDS ====================

    def get_records(self, page_name: str, collection: str,
                    record_type: Type[RecordT] = FixtureRecord) -> List[RecordT]:
        """A fixture sequence parsed into records"""
        raw = self.resolve(page_name, collection)
        if not isinstance(raw, list):
            raise DataPathNotFoundError(page_name, collection)
        return [record_type.model_validate(item) for item in raw]

    def find_record(self, page_name: str, collection: str, record_id: str,
                    record_type: Type[RecordT] = FixtureRecord) -> Optional[RecordT]:
        """First record with a matching id, or None"""
        for record in self.get_records(page_name, collection, record_type):
            if record.id == record_id:
                return record
        return None

    def get_record(self, page_name: str, collection: str, record_id: str,
                   record_type: Type[RecordT] = FixtureRecord,
                   label: Optional[str] = None) -> RecordT:
        """Like find_record but an unknown id raises RecordNotFoundError"""
        record = self.find_record(page_name, collection, record_id, record_type)
        if record is None:
            raise RecordNotFoundError(label or record_type.__name__, record_id, page_name)
        return record

    def get_valid_users(self) -> List[UserRecord]:
        return self.get_records(LOGIN_PAGE, "validUsers", UserRecord)

    def get_invalid_users(self) -> List[UserRecord]:
        return self.get_records(LOGIN_PAGE, "invalidUsers", UserRecord)

    def get_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        """
        Search valid users, then invalid users.

        Returns None when the id is unknown; callers branch on absence and
        raise their own descriptive error.
        """
        for user in self.get_valid_users() + self.get_invalid_users():
            if user.id == user_id:
                return user
        logger.debug(f"User '{user_id}' not present in login fixture")
        return None

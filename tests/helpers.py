"""Helper utilities for tests."""

from errors import StoreError
from stores.memory import InMemoryCategoryStore
from stores.remote import RecordResponse, RecordStoreClient


class FailingStore(InMemoryCategoryStore):
    """In-memory store whose reads always fail."""

    def fetch_all(self):
        raise StoreError("backend unavailable")


class FakeRecordStoreClient(RecordStoreClient):
    """Record-store client keeping rows in a dict, recording every call."""

    def __init__(self, records=None, fail_with=None):
        self.rows = {record["Id"]: dict(record) for record in records or []}
        self.fail_with = fail_with
        self.calls = []
        self._next_id = max(self.rows, default=0) + 1

    def _failure(self):
        if self.fail_with is not None:
            return RecordResponse(success=False, message=self.fail_with)
        return None

    def fetch_records(self, table, params):
        self.calls.append(("fetch", table, params))
        failure = self._failure()
        if failure:
            return failure
        rows = sorted(self.rows.values(), key=lambda row: row.get("name_c", ""))
        return RecordResponse(success=True, data=[dict(row) for row in rows])

    def create_record(self, table, params):
        self.calls.append(("create", table, params))
        failure = self._failure()
        if failure:
            return failure
        row = {"Id": self._next_id, **params["records"][0]}
        self._next_id += 1
        self.rows[row["Id"]] = row
        return RecordResponse(success=True, data=dict(row))

    def update_record(self, table, params):
        self.calls.append(("update", table, params))
        failure = self._failure()
        if failure:
            return failure
        row = params["records"][0]
        if row["Id"] not in self.rows:
            return RecordResponse(success=True, data=None)
        self.rows[row["Id"]] = dict(row)
        return RecordResponse(success=True, data=dict(row))

    def delete_record(self, table, params):
        self.calls.append(("delete", table, params))
        failure = self._failure()
        if failure:
            return failure
        removed = [self.rows.pop(i) for i in params["RecordIds"] if i in self.rows]
        return RecordResponse(success=True, data=len(removed) > 0)

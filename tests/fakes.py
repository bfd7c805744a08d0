"""
In-memory stand-in for the parts of ``google.cloud.firestore.Client`` the
store uses. Documents are copied in and out like the real client does.
"""
import copy

from google.api_core.exceptions import AlreadyExists, NotFound


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocument:
    def __init__(self, collection, doc_id):
        self._collection = collection
        self.id = doc_id

    def get(self):
        return FakeSnapshot(self.id, self._collection.docs.get(self.id))

    def set(self, data):
        self._collection.docs[self.id] = copy.deepcopy(data)

    def update(self, fields):
        if self.id not in self._collection.docs:
            raise NotFound(f"No document to update: {self.id}")
        self._collection.docs[self.id].update(copy.deepcopy(fields))

    def delete(self):
        self._collection.docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, collection, filters=(), limit=None):
        self._collection = collection
        self._filters = list(filters)
        self._limit = limit

    def where(self, field, op, value):
        assert op == "==", "only equality filters are supported"
        return FakeQuery(self._collection, self._filters + [(field, value)], self._limit)

    def limit(self, count):
        return FakeQuery(self._collection, self._filters, count)

    def stream(self):
        matched = [
            FakeSnapshot(doc_id, data)
            for doc_id, data in self._collection.docs.items()
            if all(data.get(field) == value for field, value in self._filters)
        ]
        if self._limit is not None:
            matched = matched[:self._limit]
        return iter(matched)


class FakeCollection(FakeQuery):
    def __init__(self):
        self.docs = {}
        super().__init__(self)

    def document(self, doc_id):
        return FakeDocument(self, doc_id)


class FakeWriteBatch:
    """Queues writes and applies them all or none on commit."""

    def __init__(self):
        self._writes = []

    def create(self, doc_ref, data):
        self._writes.append(("create", doc_ref, data))

    def set(self, doc_ref, data):
        self._writes.append(("set", doc_ref, data))

    def commit(self):
        for op, doc_ref, _ in self._writes:
            if op == "create" and doc_ref.id in doc_ref._collection.docs:
                raise AlreadyExists(f"Document already exists: {doc_ref.id}")

        collections = {id(ref._collection): ref._collection for _, ref, _ in self._writes}
        saved = {key: copy.deepcopy(c.docs) for key, c in collections.items()}
        try:
            for _, doc_ref, data in self._writes:
                doc_ref.set(data)
        except Exception:
            for key, collection in collections.items():
                collection.docs = saved[key]
            raise
        self._writes = []


class FakeFirestoreClient:
    def __init__(self):
        self.collections = {}

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection())

    def batch(self):
        return FakeWriteBatch()

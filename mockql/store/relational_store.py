from copy import deepcopy
from typing import Text, Dict, List, Tuple

from mockql.util.loggers import console
from mockql.util.misc_functions import get_class_name
from mockql.exceptions import StoreError, ValidationError
from mockql.constants import ID, KNOWN_FIELDS
from mockql.query.predicate import Predicate


class RelationalStore(object):
    """
    An in-memory store of named record collections. Each collection is a list
    of dicts kept in insertion order. Records handed back to callers are
    copies, so the only way to change stored data is through `insert`,
    `update` and `remove`.
    """

    def __init__(self, known_fields: Dict[Text, frozenset] = None):
        self._known_fields = dict(known_fields or KNOWN_FIELDS)
        self.reset()

    def __repr__(self):
        counts = ', '.join(
            f'{name}={len(records)}'
            for name, records in self._collections.items()
        )
        return f'<{get_class_name(self)}({counts})>'

    @property
    def collection_names(self) -> Tuple[Text]:
        return tuple(self._collections.keys())

    def reset(self):
        """
        Empty every collection.
        """
        self._collections = {name: [] for name in self._known_fields}

    def count(self, collection: Text) -> int:
        """
        Return the number of records in the collection.
        """
        return len(self._get_collection(collection))

    def find(self, collection: Text, predicate=None) -> Dict:
        """
        Return the first record satisfying the predicate, or None.
        """
        predicate = Predicate.build(predicate)
        index = self._index_of(collection, predicate)
        records = self._get_collection(collection)
        return deepcopy(records[index]) if index is not None else None

    def filter(self, collection: Text, predicate=None) -> List[Dict]:
        """
        Return every record satisfying the predicate, in insertion order.
        """
        predicate = Predicate.build(predicate)
        return [
            deepcopy(record)
            for record in self._get_collection(collection)
            if predicate(record)
        ]

    def insert(self, collection: Text, record: Dict) -> Dict:
        """
        Append a record to the collection. The record must already carry an
        id that is not in use.
        """
        records = self._get_collection(collection)
        self._validate_fields(collection, record)

        _id = record.get(ID)
        if _id is None:
            raise StoreError(
                f'cannot insert into {collection} without an id',
                data={'collection': collection, 'record': record},
            )
        if any(x[ID] == _id for x in records):
            raise StoreError(
                f'duplicate id in {collection}: {_id}',
                data={'collection': collection, 'id': _id},
            )

        stored_record = deepcopy(record)
        records.append(stored_record)

        console.debug(f'inserted {collection} record {_id}')

        return deepcopy(stored_record)

    def update(self, collection: Text, predicate, data: Dict) -> Dict:
        """
        Merge `data` into the first record satisfying the predicate and return
        the updated record, or None if nothing matched. Record ids are never
        changed.
        """
        predicate = Predicate.build(predicate)
        data = {k: v for k, v in (data or {}).items() if k != ID}
        self._validate_fields(collection, data)

        index = self._index_of(collection, predicate)
        if index is None:
            console.debug(f'no {collection} record to update for {predicate}')
            result = None
        else:
            stored_record = self._get_collection(collection)[index]
            stored_record.update(deepcopy(data))
            console.debug(
                f'updated {collection} record {stored_record[ID]}',
                data={'fields': sorted(data.keys())} if data else None
            )
            result = deepcopy(stored_record)

        return result

    def remove(self, collection: Text, predicate, many=False) -> List[Dict]:
        """
        Delete the first record satisfying the predicate, or all of them if
        `many` is set, returning the deleted records. Deleting nothing is not
        an error.
        """
        predicate = Predicate.build(predicate)
        records = self._get_collection(collection)

        removed = []
        kept = []
        for record in records:
            if (many or not removed) and predicate(record):
                removed.append(record)
            else:
                kept.append(record)

        records[:] = kept

        if removed:
            console.debug(
                f'removed {len(removed)} {collection} record(s)',
                data={'ids': [x[ID] for x in removed]}
            )

        return removed

    def _get_collection(self, collection: Text) -> List[Dict]:
        records = self._collections.get(collection)
        if records is None:
            raise StoreError(
                f'unrecognized collection: {collection}',
                data={'collection': collection},
            )
        return records

    def _index_of(self, collection: Text, predicate: Predicate) -> int:
        for index, record in enumerate(self._get_collection(collection)):
            if predicate(record):
                return index
        return None

    def _validate_fields(self, collection: Text, data: Dict):
        known_fields = self._known_fields.get(collection)
        if known_fields is None:
            raise StoreError(
                f'unrecognized collection: {collection}',
                data={'collection': collection},
            )
        unknown_fields = set(data.keys()) - known_fields
        if unknown_fields:
            raise ValidationError(
                f'unknown fields for {collection}: '
                f'{", ".join(sorted(unknown_fields))}',
                data={'collection': collection, 'fields': sorted(unknown_fields)},
            )

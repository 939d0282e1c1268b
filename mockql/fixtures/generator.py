from typing import Callable, Dict, Text

from faker import Faker

from mockql.util.loggers import console
from mockql.util.misc_functions import random_id
from mockql.query.predicate import Field
from mockql.store import RelationalStore
from mockql.constants import (
    ID,
    COLLECTION,
    FIXTURE_SEED,
    AUTHOR_COUNT,
    POSTS_PER_AUTHOR,
)


class FixtureGenerator(object):
    """
    Populates a RelationalStore with authors and their posts.

    Names, titles and bodies come from a Faker instance seeded with `seed`,
    so every generator built with the same seed writes the same content in
    the same order. Record ids come from `id_factory`, which is random by
    default; pass `deterministic_ids=True` to draw fixture ids from a
    second Faker instance with the same seed instead, which leaves the
    content unchanged. Seeded ids repeat across calls, so generating twice
    into one store with `deterministic_ids` raises a StoreError.
    """

    def __init__(
        self,
        seed: int = None,
        author_count: int = None,
        posts_per_author: int = None,
        id_factory: Callable[[], Text] = None,
        deterministic_ids: bool = False,
        locale: Text = 'en_US',
    ):
        self._seed = FIXTURE_SEED if seed is None else seed
        self._author_count = AUTHOR_COUNT if author_count is None else author_count
        self._posts_per_author = (
            POSTS_PER_AUTHOR if posts_per_author is None else posts_per_author
        )
        self._locale = locale
        self._deterministic_ids = deterministic_ids
        self._id_factory = id_factory or random_id
        self._faker = None
        self._id_faker = None

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def author_count(self) -> int:
        return self._author_count

    @property
    def posts_per_author(self) -> int:
        return self._posts_per_author

    def generate(self, store: RelationalStore) -> RelationalStore:
        """
        Add a fresh set of fixtures to the store, returning the store.
        Records already in the store are left untouched. The Faker instances
        are reseeded on every call.
        """
        self._faker = Faker(self._locale)
        self._faker.seed_instance(self._seed)
        self._id_faker = Faker(self._locale)
        self._id_faker.seed_instance(self._seed)

        authors = [
            store.insert(COLLECTION.AUTHORS, self.generate_author())
            for _ in range(self._author_count)
        ]

        for author in authors:
            author_id = author[ID]
            for _ in range(self._posts_per_author):
                store.insert(COLLECTION.POSTS, self.generate_post(author_id))

            # snapshot of the author's post ids at generation time
            post_ids = [
                post[ID] for post in
                store.filter(COLLECTION.POSTS, Field('author') == author_id)
            ]
            store.update(
                COLLECTION.AUTHORS, Field(ID) == author_id, {'posts': post_ids}
            )

        console.debug(
            f'generated {self._author_count} authors with '
            f'{self._posts_per_author} posts each (seed: {self._seed})'
        )
        return store

    def generate_author(self) -> Dict:
        return {
            ID: self._next_id(),
            'name': f'{self._faker.first_name()} {self._faker.last_name()}',
        }

    def generate_post(self, author_id: Text) -> Dict:
        return {
            ID: self._next_id(),
            'title': self._faker.sentence(nb_words=4).rstrip('.').title(),
            'body': self._faker.sentence(nb_words=12),
            'author': author_id,
        }

    def _next_id(self) -> Text:
        if self._deterministic_ids:
            return self._id_faker.uuid4()
        return self._id_factory()


def build_store(seed: int = None, **kwargs) -> RelationalStore:
    """
    Return a new RelationalStore populated by a FixtureGenerator.
    """
    generator = FixtureGenerator(seed=seed, **kwargs)
    return generator.generate(RelationalStore())

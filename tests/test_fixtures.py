import uuid

from mockql import RelationalStore, FixtureGenerator, Field, build_store


def content(store):
    authors = [author['name'] for author in store.filter('authors')]
    posts = [(post['title'], post['body']) for post in store.filter('posts')]
    return authors, posts


class TestFixtureGenerator:
    def test_generates_two_authors_with_four_posts_each(self, store):
        authors = store.filter('authors')
        assert len(authors) == 2
        assert store.count('posts') == 8

        for author in authors:
            posts = store.filter('posts', Field('author') == author['id'])
            assert len(posts) == 4
            assert author['name']
            for post in posts:
                assert post['title']
                assert post['body']

    def test_author_posts_snapshot(self, store):
        for author in store.filter('authors'):
            expected = [
                post['id'] for post in
                store.filter('posts', Field('author') == author['id'])
            ]
            assert author['posts'] == expected

    def test_content_is_reproducible(self):
        first = build_store(seed=666)
        second = build_store(seed=666)
        assert content(first) == content(second)

    def test_default_seed_ignores_environment(self, monkeypatch):
        monkeypatch.setenv('MOCKQL_FIXTURE_SEED', '1')
        monkeypatch.setenv('MOCKQL_AUTHOR_COUNT', '5')
        store = build_store()
        assert store.count('authors') == 2
        assert content(store) == content(build_store(seed=666))

    def test_ids_are_random_by_default(self):
        first = build_store(seed=666)
        second = build_store(seed=666)
        first_ids = {x['id'] for x in first.filter('authors')}
        second_ids = {x['id'] for x in second.filter('authors')}
        assert first_ids.isdisjoint(second_ids)

    def test_different_seeds_differ(self):
        assert content(build_store(seed=666)) != content(build_store(seed=1))

    def test_deterministic_ids(self):
        first = build_store(seed=666, deterministic_ids=True)
        second = build_store(seed=666, deterministic_ids=True)
        assert first.filter('authors') == second.filter('authors')
        assert first.filter('posts') == second.filter('posts')

    def test_custom_counts_and_id_factory(self):
        counter = iter(range(100))
        generator = FixtureGenerator(
            author_count=3,
            posts_per_author=1,
            id_factory=lambda: f'id-{next(counter)}',
        )
        store = generator.generate(RelationalStore())
        assert [x['id'] for x in store.filter('authors')] == ['id-0', 'id-1', 'id-2']
        assert store.count('posts') == 3

    def test_default_ids_are_uuids(self, store):
        for author in store.filter('authors'):
            assert str(uuid.UUID(author['id'])) == author['id']

    def test_deterministic_ids_leave_content_unchanged(self):
        seeded = build_store(seed=666, deterministic_ids=True)
        assert content(seeded) == content(build_store(seed=666))

    def test_generate_into_populated_store(self):
        store = build_store(seed=666)
        original = store.filter('authors')

        FixtureGenerator(seed=666).generate(store)

        assert store.count('authors') == 4
        assert store.count('posts') == 16
        for author in original:
            posts = store.filter('posts', Field('author') == author['id'])
            assert len(posts) == 4
            assert store.find('authors', Field('id') == author['id']) == author

        for author in store.filter('authors'):
            expected = [
                post['id'] for post in
                store.filter('posts', Field('author') == author['id'])
            ]
            assert author['posts'] == expected

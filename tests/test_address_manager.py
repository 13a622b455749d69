"""
Tests for identity generation, validation and persistence
"""
import random
import re

import pytest

from tmpmail.core.models import EmailAddress
from tmpmail.features.identity import AddressManager
from tmpmail.utils.errors import InvalidAddressError, ProviderError, ValidationError

from .test_helpers import FakeProvider, SequenceRandom


@pytest.fixture
def domains():
    return ['example.com', 'mail.test', 'throwaway.org']


@pytest.fixture
def manager(domains, app_config, store):
    fake = FakeProvider(domains=domains)
    return AddressManager(fake.client(app_config), store, rng=random.Random(1234))


class TestRandomGeneration:
    """Tests for random addresses"""

    def test_random_addresses_follow_the_rules(self, manager, domains):
        for _ in range(50):
            address = manager.generate()
            assert len(address.username) == 11
            assert re.fullmatch(r'[a-z0-9]+', address.username)
            assert address.domain in domains

    def test_domain_choice_is_not_fixed(self, manager, domains):
        chosen = {manager.generate().domain for _ in range(60)}
        assert len(chosen) > 1

    def test_generate_persists_address(self, manager, store):
        address = manager.generate()
        assert store.read_address() == address

    def test_generate_overwrites_previous_address(self, manager, store):
        first = manager.generate()
        second = manager.generate()
        assert first != second
        assert store.read_address() == second

    def test_scripted_seed_produces_expected_address(self, app_config, store):
        fake = FakeProvider(domains=['example.com'])
        manager = AddressManager(fake.client(app_config), store, rng=SequenceRandom('abc12def345'))

        address = manager.ensure_identity()

        assert address == EmailAddress('abc12def345', 'example.com')
        assert store.address_path.read_text() == 'abc12def345@example.com'

    def test_empty_domain_list_fails_without_persisting(self, app_config, store):
        fake = FakeProvider(domains=[])
        manager = AddressManager(fake.client(app_config), store)
        with pytest.raises(ProviderError):
            manager.generate()
        assert store.read_address() is None


class TestEnsureIdentity:
    """Tests for ensure_identity"""

    def test_is_idempotent(self, manager):
        assert manager.ensure_identity() == manager.ensure_identity()

    def test_is_idempotent_across_instances(self, domains, app_config, store):
        first = AddressManager(FakeProvider(domains=domains).client(app_config), store)
        second = AddressManager(FakeProvider(domains=domains).client(app_config), store)
        assert first.ensure_identity() == second.ensure_identity()

    def test_cached_address_needs_no_network(self, app_config, store):
        store.write_address(EmailAddress('cached', 'example.com'))
        fake = FakeProvider()
        manager = AddressManager(fake.client(app_config), store)

        assert manager.ensure_identity() == EmailAddress('cached', 'example.com')
        assert fake.requests == []

    def test_undecodable_slot_is_replaced(self, manager, store, session_dir, domains):
        session_dir.mkdir(parents=True)
        store.address_path.write_bytes(b'\xff\xfeabc@example.com')

        address = manager.ensure_identity()

        assert address.domain in domains
        assert store.read_address() == address


class TestCustomAddresses:
    """Tests for user supplied addresses"""

    @pytest.mark.parametrize('username', [
        'abuse', 'webmaster', 'contact', 'postmaster', 'hostmaster', 'admin', 'Admin', 'siteadmin',
    ])
    def test_blacklisted_username_rejected(self, manager, store, username):
        with pytest.raises(ValidationError):
            manager.generate(custom_username=username, custom_domain='example.com')
        assert store.read_address() is None

    def test_blacklist_is_reported_before_bad_domain(self, manager):
        with pytest.raises(ValidationError):
            manager.generate_from_string('admin@unknown.net')

    def test_unknown_domain_rejected(self, manager, store):
        with pytest.raises(InvalidAddressError) as exc_info:
            manager.generate(custom_username='alice', custom_domain='unknown.net')
        assert 'example.com' in exc_info.value.message
        assert store.read_address() is None

    def test_invalid_characters_rejected(self, manager):
        with pytest.raises(InvalidAddressError):
            manager.generate(custom_username='al.ice', custom_domain='example.com')

    def test_error_kinds_are_distinct(self):
        assert not issubclass(InvalidAddressError, ValidationError)
        assert not issubclass(ValidationError, InvalidAddressError)

    def test_valid_custom_address_is_case_folded_and_stored(self, manager, store):
        address = manager.generate_from_string('Alice42@Example.com')
        assert address == EmailAddress('alice42', 'example.com')
        assert store.read_address() == address

    def test_string_without_at_rejected(self, manager):
        with pytest.raises(InvalidAddressError):
            manager.generate_from_string('alice')

    def test_custom_username_with_random_domain(self, manager, domains):
        address = manager.generate(custom_username='bob')
        assert address.username == 'bob'
        assert address.domain in domains

    def test_failed_custom_address_keeps_previous(self, manager, store):
        previous = manager.generate()
        with pytest.raises(InvalidAddressError):
            manager.generate_from_string('bob@unknown.net')
        assert store.read_address() == previous

    def test_mixed_case_provider_domains_accept_custom_address(self, app_config, store):
        fake = FakeProvider(domains=['Example.COM'])
        manager = AddressManager(fake.client(app_config), store)

        address = manager.generate_from_string('alice@example.com')

        assert address == EmailAddress('alice', 'example.com')
        assert store.read_address() == address

"""
Tests for the mailbox provider client

Tests cover:
- Domain list fetching and error cases
- Inbox listing order and empty inbox
- Message fetching and the not-found sentinel
- Download links and URL shortening fallback
"""
import httpx
import pytest

from tmpmail.core.models import EmailAddress
from tmpmail.core.provider import ProviderClient
from tmpmail.utils.errors import NotFoundError, ProviderError

from .test_helpers import FakeProvider, PayloadTestHelper

ADDRESS = EmailAddress('abc12def345', 'example.com')


def client_for(app_config, handler):
    """ProviderClient whose transport is a bare handler function"""
    return ProviderClient(app_config, http_client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestFetchDomains:
    """Tests for fetch_domains"""

    def test_returns_domains_in_provider_order(self, app_config):
        fake = FakeProvider(domains=['b.com', 'a.com', 'b.com'])
        assert fake.client(app_config).fetch_domains() == ['b.com', 'a.com']

    def test_empty_domain_list_is_error(self, app_config):
        fake = FakeProvider(domains=[])
        with pytest.raises(ProviderError):
            fake.client(app_config).fetch_domains()

    def test_unparseable_response_is_error(self, app_config):
        client = client_for(app_config, lambda request: httpx.Response(200, text='<html>oops'))
        with pytest.raises(ProviderError):
            client.fetch_domains()

    def test_http_error_status_is_error(self, app_config):
        client = client_for(app_config, lambda request: httpx.Response(503, text='down'))
        with pytest.raises(ProviderError) as exc_info:
            client.fetch_domains()
        assert exc_info.value.details['status'] == 503

    def test_transport_failure_is_error(self, app_config):
        def handler(request):
            raise httpx.ConnectError('connection refused', request=request)

        client = client_for(app_config, handler)
        with pytest.raises(ProviderError):
            client.fetch_domains()

    def test_uses_configured_base_url(self, app_config):
        fake = FakeProvider()
        fake.client(app_config).fetch_domains()
        request = fake.requests[0]
        assert request.url.host == 'mail.test'
        assert request.url.params['action'] == 'getDomainList'


class TestFetchInbox:
    """Tests for fetch_inbox"""

    def test_empty_inbox(self, app_config):
        fake = FakeProvider(inbox=[])
        assert fake.client(app_config).fetch_inbox(ADDRESS) == []

    def test_keeps_provider_order(self, app_config):
        fake = FakeProvider(inbox=[
            PayloadTestHelper.create_summary(id=9, subject='second'),
            PayloadTestHelper.create_summary(id=7, subject='first'),
        ])
        messages = fake.client(app_config).fetch_inbox(ADDRESS)
        assert [m.id for m in messages] == [9, 7]
        assert messages[0].subject == 'second'

    def test_sends_login_and_domain(self, app_config):
        fake = FakeProvider()
        fake.client(app_config).fetch_inbox(ADDRESS)
        params = fake.requests[0].url.params
        assert params['login'] == 'abc12def345'
        assert params['domain'] == 'example.com'

    def test_sentinel_means_empty_inbox(self, app_config):
        client = client_for(app_config, lambda request: httpx.Response(200, text='Message not found'))
        assert client.fetch_inbox(ADDRESS) == []

    def test_malformed_entry_is_error(self, app_config):
        fake = FakeProvider(inbox=[{'from': 'x@y.com'}])
        with pytest.raises(ProviderError):
            fake.client(app_config).fetch_inbox(ADDRESS)


class TestFetchMessage:
    """Tests for fetch_message"""

    def test_parses_message(self, app_config):
        payload = PayloadTestHelper.create_message(
            id=5,
            attachments=[
                {'filename': 'a.pdf', 'contentType': 'application/pdf', 'size': 10},
                {'filename': 'a.pdf', 'contentType': 'application/pdf', 'size': 20},
            ],
        )
        fake = FakeProvider(messages={5: payload})
        detail = fake.client(app_config).fetch_message(ADDRESS, 5)

        assert detail.id == 5
        assert detail.sender == 'sender@example.com'
        assert [a.filename for a in detail.attachments] == ['a.pdf', 'a.pdf']
        assert [a.size for a in detail.attachments] == [10, 20]

    def test_sentinel_raises_not_found(self, app_config):
        fake = FakeProvider(messages={})
        with pytest.raises(NotFoundError):
            fake.client(app_config).fetch_message(ADDRESS, 42)

    def test_sentinel_must_match_exactly(self, app_config):
        client = client_for(app_config, lambda request: httpx.Response(200, text='Message not found!'))
        with pytest.raises(ProviderError):
            client.fetch_message(ADDRESS, 1)

    def test_message_without_any_body_is_error(self, app_config):
        payload = PayloadTestHelper.create_message()
        del payload['htmlBody']
        del payload['textBody']
        fake = FakeProvider(messages={1: payload})
        with pytest.raises(ProviderError):
            fake.client(app_config).fetch_message(ADDRESS, 1)


class TestLinks:
    """Tests for download links and shortening"""

    def test_download_link_carries_all_parts(self, provider):
        link = httpx.URL(provider.download_link(ADDRESS, 3, 'report.pdf'))
        assert link.host == 'mail.test'
        assert link.params['action'] == 'download'
        assert link.params['login'] == 'abc12def345'
        assert link.params['domain'] == 'example.com'
        assert link.params['id'] == '3'
        assert link.params['file'] == 'report.pdf'

    def test_shorten_url_success(self, app_config):
        fake = FakeProvider(shortener=lambda request: httpx.Response(200, text='https://is.gd/xyz\n'))
        result = fake.client(app_config).shorten_url('https://mail.test/long')
        assert result.url == 'https://is.gd/xyz'
        assert result.shortened is True

    def test_shorten_url_posts_url_field(self, app_config):
        fake = FakeProvider()
        fake.client(app_config).shorten_url('https://mail.test/long')
        request = fake.requests[0]
        assert request.method == 'POST'
        assert request.url.host == 'short.test'
        assert b'url=https%3A%2F%2Fmail.test%2Flong' in request.content

    def test_shorten_url_falls_back_on_http_error(self, app_config):
        fake = FakeProvider(shortener=lambda request: httpx.Response(500, text='boom'))
        result = fake.client(app_config).shorten_url('https://mail.test/long')
        assert result.url == 'https://mail.test/long'
        assert result.shortened is False

    def test_shorten_url_falls_back_on_unexpected_body(self, app_config):
        fake = FakeProvider(shortener=lambda request: httpx.Response(200, text='Error: rate limited'))
        result = fake.client(app_config).shorten_url('https://mail.test/long')
        assert result.url == 'https://mail.test/long'
        assert result.shortened is False

    def test_shorten_url_falls_back_on_transport_error(self, app_config):
        def shortener(request):
            raise httpx.ConnectError('unreachable', request=request)

        fake = FakeProvider(shortener=shortener)
        result = fake.client(app_config).shorten_url('https://mail.test/long')
        assert result.shortened is False

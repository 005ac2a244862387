"""Tests for the account upload endpoints."""

import pytest
from django.http import QueryDict

from fserver.apps.accounts.models import Account
from fserver.apps.accounts.views import collect_batch_items
from fserver.apps.files.models import FileInfo


def test_collect_batch_items_orders_by_index():
    """Test indexed fields are grouped and sorted by index."""
    data = QueryDict(mutable=True)
    data['accounts[1].email'] = 'b@example.com'
    data['accounts[0].email'] = 'a@example.com'
    data['accounts[0].password'] = 'pw'
    data['other'] = 'ignored'

    assert collect_batch_items(data) == [
        {'email': 'a@example.com', 'password': 'pw'},
        {'email': 'b@example.com'},
    ]


@pytest.mark.django_db
def test_single_account(api_client, mock_s3, make_upload):
    """Test account is created and returned without its password."""
    response = api_client.post(
        '/accounts/single',
        {
            'file': make_upload(filename='c.jpg', content_type='image/jpeg'),
            'email': 'user@example.com',
            'password': 's3cret',
        },
        format='multipart',
    )

    assert response.status_code == 200
    body = response.json()
    assert body['message'] == 'File save with account'
    assert body['status'] == 'OK'
    assert body['entity']['email'] == 'user@example.com'
    assert body['entity']['file_info']['content_type'] == 'image/jpeg'
    assert 'password' not in body['entity']
    assert 's3cret' not in response.content.decode()


@pytest.mark.django_db
def test_single_account_invalid_email(api_client, mock_s3, make_upload):
    """Test malformed email is rejected before storing anything."""
    response = api_client.post(
        '/accounts/single',
        {
            'file': make_upload(),
            'email': 'not-an-email',
            'password': 's3cret',
        },
        format='multipart',
    )

    assert response.status_code == 400
    assert 'email' in response.json()['errors']
    assert not FileInfo.objects.exists()


@pytest.mark.django_db
def test_single_account_wrong_type(api_client, mock_s3, make_upload):
    """Test rejected file type creates no account."""
    response = api_client.post(
        '/accounts/single',
        {
            'file': make_upload(filename='b.txt', content_type='text/plain'),
            'email': 'user@example.com',
            'password': 's3cret',
        },
        format='multipart',
    )

    assert response.status_code == 400
    assert response.json()['errors']['offending'] == 'text/plain'
    assert not Account.objects.exists()


@pytest.mark.django_db
def test_batch_accounts(api_client, mock_s3, make_upload):
    """Test batch creates accounts in index order."""
    response = api_client.post(
        '/accounts/batch',
        {
            'accounts[0].file': make_upload(filename='first.png'),
            'accounts[0].email': 'first@example.com',
            'accounts[0].password': 'one',
            'accounts[1].file': make_upload(filename='second.png'),
            'accounts[1].email': 'second@example.com',
            'accounts[1].password': 'two',
        },
        format='multipart',
    )

    assert response.status_code == 200
    body = response.json()
    assert [item['entity']['email'] for item in body] == [
        'first@example.com',
        'second@example.com',
    ]
    assert [item['entity']['file_info']['filename'] for item in body] == [
        'first.png',
        'second.png',
    ]
    assert Account.objects.count() == 2


@pytest.mark.django_db
def test_batch_accounts_rejects_invalid_item(api_client, mock_s3, make_upload):
    """Test one rejected file type rejects the whole batch."""
    response = api_client.post(
        '/accounts/batch',
        {
            'accounts[0].file': make_upload(filename='a.png'),
            'accounts[0].email': 'first@example.com',
            'accounts[0].password': 'one',
            'accounts[1].file': make_upload(
                filename='b.txt',
                content_type='text/plain',
            ),
            'accounts[1].email': 'second@example.com',
            'accounts[1].password': 'two',
        },
        format='multipart',
    )

    assert response.status_code == 400
    assert response.json()['errors']['offenders'] == [
        {'filename': 'b.txt', 'content_type': 'text/plain'},
    ]
    assert not Account.objects.exists()
    assert not FileInfo.objects.exists()


@pytest.mark.django_db
def test_batch_accounts_empty(api_client):
    """Test batch without accounts is rejected as empty."""
    response = api_client.post('/accounts/batch', {}, format='multipart')

    assert response.status_code == 400
    assert response.json()['status'] == 'BAD_REQUEST'
    assert response.json()['errors'] == {'size': 0}

from fastapi.testclient import TestClient

from darshan_admin.core.exceptions import (
    DraftValidationError,
    EntityNotFoundError,
    SaveFailedError,
    StoreError,
    TranslationWriteError,
)
from darshan_admin.main import app

client = TestClient(app)


def test_unknown_route_returns_error_envelope():
    r = client.get('/no-such-page')
    assert r.status_code == 404
    body = r.json()
    assert body['error_code'] == 'NOT_FOUND'
    assert body['request_id']
    assert 'timestamp' in body


def test_malformed_body_returns_validation_envelope():
    r = client.post('/destinations', content='not json', headers={'Content-Type': 'application/json'})
    assert r.status_code == 422
    body = r.json()
    assert body['error_code'] == 'VALIDATION_ERROR'
    assert body['details']['validation_errors']


def test_draft_validation_error_carries_field_errors():
    err = DraftValidationError({'translations.ta.name': 'Name is required'})
    assert err.status_code == 422
    assert err.details == {'field_errors': {'translations.ta.name': 'Name is required'}}


def test_save_failed_error_reports_language_and_committed_steps():
    cause = TranslationWriteError('kn', StoreError('timeout', collection='destination_translations', operation='insert'))
    err = SaveFailedError('writing_translations', cause, entity_id='D1', committed_steps=['writing_parent'])

    assert err.status_code == 502
    assert err.error_code.value == 'SAVE_FAILED'
    assert err.details['language'] == 'kn'
    assert err.details['store_error']['collection'] == 'destination_translations'
    assert '(kn)' in err.message


def test_save_failed_error_keeps_not_found_status():
    cause = EntityNotFoundError('events', 'E9', operation='update')
    err = SaveFailedError('writing_parent', cause, entity_id='E9')
    assert err.status_code == 404
    assert err.details['language'] is None

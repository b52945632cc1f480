import os
import subprocess
import sys
from io import StringIO
from pathlib import Path
from unittest import mock

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db.utils import OperationalError

from practice import db
from practice.models import Doctor
from practice.services import auth

pytestmark = pytest.mark.django_db


def test_checkdb_reports_success():
    out = StringIO()
    call_command('checkdb', stdout=out)
    assert "ok: database 'default' connected" in out.getvalue()


def test_checkdb_fails_when_database_is_down():
    with mock.patch('practice.management.commands.checkdb.check_database_connection',
                    side_effect=OperationalError('refused')):
        with pytest.raises(CommandError):
            call_command('checkdb', stdout=StringIO())


def test_startup_check_exits_on_unreachable_database():
    with mock.patch.object(db, 'check_database_connection', side_effect=OperationalError('refused')):
        with pytest.raises(SystemExit) as exc:
            db.ensure_database_or_exit()
    assert exc.value.code == 1


def test_ensure_demo_doctor_is_idempotent():
    call_command('ensure_demo_doctor', stdout=StringIO())
    doctor = Doctor.objects.get(email='demo.doctor@medtrack.local')
    doctor.password = auth.hash_password('changed1')
    doctor.save(update_fields=['password'])

    call_command('ensure_demo_doctor', stdout=StringIO())
    assert Doctor.objects.filter(email='demo.doctor@medtrack.local').count() == 1
    token, who = auth.login('demo.doctor@medtrack.local', 'demo123')
    assert who.pk == doctor.pk and token


def test_unknown_route_uses_django_404(api_client):
    assert api_client.get('/nothing-here').status_code == 404


def test_malformed_json_is_a_400_envelope(api_client):
    r = api_client.post('/clinics', data='{"name": ', content_type='application/json')
    assert r.status_code == 400
    assert r.json()['success'] is False


@pytest.mark.parametrize('module', ['medtrack.urls', 'practice.exceptions', 'practice.authentication',
                                    'rest_framework.views'])
def test_entry_modules_import_in_a_fresh_interpreter(module):
    root = Path(__file__).resolve().parents[2]
    env = dict(os.environ, DJANGO_SETTINGS_MODULE='medtrack.settings')
    result = subprocess.run(
        [sys.executable, '-c', f'import django; django.setup(); import {module}'],
        cwd=root, env=env, capture_output=True, text=True,
    )
    assert result.returncode == 0, result.stderr

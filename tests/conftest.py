import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pokermind.settings")
django.setup()


@pytest.fixture
def client():
    from django.test import Client

    return Client()

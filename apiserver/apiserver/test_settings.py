from .settings import *  # noqa: F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'ATOMIC_REQUESTS': False,
    }
}

LOG_LEVEL = 'DEBUG'
LOGGING['root']['level'] = LOG_LEVEL  # noqa: F405

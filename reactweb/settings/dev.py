# reactweb/settings/dev.py
# export DJANGO_SETTINGS_MODULE=reactweb.settings.dev

from .base import *

DEBUG = True

ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver']

# Dev: pas de redirection SSL forcée
SECURE_SSL_REDIRECT = False

LOGGING['loggers'].update({
    'apps.react': {
        'handlers': ['console'],
        'level': os.getenv('REACT_LOG_LEVEL', 'DEBUG'),
        'propagate': False,
    },
})

# scriptbuild/settings/dev.py
# export DJANGO_SETTINGS_MODULE=scriptbuild.settings.dev

from .base import *

DEBUG = True

ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver']

# Dev: assets servis localement, traces de résolution visibles
SCRIPTS_CDN_ENABLED = env_flag("SCRIPTS_CDN_ENABLED", default=False)

LOGGING['loggers'].update({
    'scripts.core.loader': {
        'handlers': ['console'],
        'level': 'DEBUG',
        'propagate': False,
    },
})

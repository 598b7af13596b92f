import os

APP_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.environ.get('NOLEJ_PC_CONFIG_DIR', os.path.join(APP_DIR, 'config'))
CONFIG_FILE = os.environ.get('NOLEJ_PC_CONFIG', os.path.join(CONFIG_DIR, 'settings.yaml'))
DB_FILE = os.path.join(CONFIG_DIR, 'nolej_pc.db')
TRANSLATIONS_DIR = os.path.join(APP_DIR, 'translations')

NOLEJ_PC_DB = 'sqlite:///' + DB_FILE

PLUGIN_NAME = 'NolejPageComponent'
PLUGIN_VERSION = '1.1.0'

# Repository object type of the Nolej plugin
PLUGIN_ID = 'xnlj'
TABLE_PREFIX = 'rep_robj_' + PLUGIN_ID
TABLE_DOC = TABLE_PREFIX + '_doc'
TABLE_H5P = TABLE_PREFIX + '_h5p'
TABLE_DATA = TABLE_PREFIX + '_data'

# Document status values, only completed documents expose activities
STATUS_CREATION = 0
STATUS_ANALYSIS = 1
STATUS_ANALYSIS_PENDING = 2
STATUS_REVISION = 3
STATUS_ACTIVITIES = 4
STATUS_COMPLETED = 5

# Explorer
EXPLORER_TYPE_WHITELIST = ['root', 'cat', 'grp', 'fold', 'crs', PLUGIN_ID]
EXPLORER_CLICKABLE_TYPES = [PLUGIN_ID]

# Page modes
MODE_EDIT = 'edit'
MODE_PRESENTATION = 'presentation'
PAGE_MODES = [MODE_EDIT, MODE_PRESENTATION, 'print', 'preview', 'offline']

# Property keys stored in the page
PROP_DOCUMENT_ID = 'document_id'
PROP_CONTENT_ID = 'content_id'

H5P_MODE_IFRAME = 'iframe'
H5P_MODE_INLINE = 'inline'

DEFAULT_SETTINGS = {
    "database": {
        "uri": NOLEJ_PC_DB,
    },
    "plugin": {
        "active": True,
    },
    "h5p": {
        "base_url": "http://localhost:3000",
        "mode": H5P_MODE_IFRAME,
        "timeout": 10,
    },
    "i18n": {
        "default_locale": "en",
    },
}

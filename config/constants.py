"""
Centralized constants for the LIPIcs pandoc filter.
Metadata keys, macro names and class names shared by the emitters.
"""

# ===========================================
# METADATA KEYS
# ===========================================
META_KNOWLEDGES = 'knowledges'              # list of knowledge entries
META_MODE = 'knowledges-mode'               # latex | fast-latex | pandoc
META_DEBUG = 'lipics-debug'                 # presence-only toggle
META_REPORT = 'knowledges-report'           # written back when debugging

# ===========================================
# OUTPUT MODES
# ===========================================
MODE_LATEX = 'latex'
MODE_FAST_LATEX = 'fast-latex'
MODE_PANDOC = 'pandoc'
DEFAULT_MODE = MODE_PANDOC
LATEX_TARGET = 'latex'                      # CLI target enabling LaTeX modes

# ===========================================
# KNOWLEDGE DIRECTIVES
# ===========================================
CLASS_INTRO = 'intro'
CLASS_REINTRO = 'reintro'
CLASS_REF = 'ref'
KEY_NAME = 'kl'
KEY_SCOPE = 'scope'

KL_ID_PREFIX = 'kl-'
KREF_ID_PREFIX = 'kref-'
KL_DEFINED = 'kl-defined'
KL_UNDEFINED = 'kl-undefined'

# ===========================================
# LATEX MACROS (preamble contract)
# ===========================================
MACRO_INTRO = 'intro'
MACRO_REINTRO = 'reintro'
MACRO_REF = 'kl'

MACRO_FAST_DEF = 'akldef'
MACRO_FAST_REDEF = 'aklredef'
MACRO_FAST_REF = 'aklref'
MACRO_FAST_DEF_ERROR = 'akldeferror'
MACRO_FAST_REDEF_ERROR = 'aklredeferror'
MACRO_FAST_REF_ERROR = 'aklreferror'

# ===========================================
# THEOREMS
# ===========================================
CUSTOM_THEOREM_PREFIX = 'custom:'
CLASS_SKETCH = 'sketch'
CLASS_APPENDIX = 'appendix'
KEY_RESTATABLE = 'restatable'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5

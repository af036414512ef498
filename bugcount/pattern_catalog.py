# bugcount/pattern_catalog.py

"""
Bundled mapping from FindBugs bug types to (abbreviation, category).

Each key is the `type` attribute of a BugInstance, and the value holds the
short code and category the core FindBugs plugin declares for it. Plugin
descriptors loaded at runtime extend or override these entries.
"""

from typing import Dict, Tuple

BUG_PATTERNS: Dict[str, Tuple[str, str]] = {
    # 1) Correctness
    "NP_NULL_ON_SOME_PATH":                 ("NP", "CORRECTNESS"),
    "NP_ALWAYS_NULL":                       ("NP", "CORRECTNESS"),
    "NP_NULL_PARAM_DEREF":                  ("NP", "CORRECTNESS"),
    "RV_RETURN_VALUE_IGNORED":              ("RV", "CORRECTNESS"),
    "EC_UNRELATED_TYPES":                   ("EC", "CORRECTNESS"),
    "IL_INFINITE_RECURSIVE_LOOP":           ("IL", "CORRECTNESS"),
    "UWF_UNWRITTEN_FIELD":                  ("UwF", "CORRECTNESS"),
    "BC_IMPOSSIBLE_CAST":                   ("BC", "CORRECTNESS"),

    # 2) Bad practice
    "ES_COMPARING_STRINGS_WITH_EQ":         ("ES", "BAD_PRACTICE"),
    "SE_BAD_FIELD":                         ("Se", "BAD_PRACTICE"),
    "HE_EQUALS_USE_HASHCODE":               ("HE", "BAD_PRACTICE"),
    "OS_OPEN_STREAM":                       ("OS", "BAD_PRACTICE"),
    "DE_MIGHT_IGNORE":                      ("DE", "BAD_PRACTICE"),
    "RR_NOT_CHECKED":                       ("RR", "BAD_PRACTICE"),

    # 3) Multithreaded correctness
    "IS2_INCONSISTENT_SYNC":                ("IS", "MT_CORRECTNESS"),
    "DC_DOUBLECHECK":                       ("DC", "MT_CORRECTNESS"),
    "UW_UNCOND_WAIT":                       ("UW", "MT_CORRECTNESS"),
    "SWL_SLEEP_WITH_LOCK_HELD":             ("SWL", "MT_CORRECTNESS"),

    # 4) Malicious code vulnerability
    "EI_EXPOSE_REP":                        ("EI", "MALICIOUS_CODE"),
    "EI_EXPOSE_REP2":                       ("EI2", "MALICIOUS_CODE"),
    "MS_SHOULD_BE_FINAL":                   ("MS", "MALICIOUS_CODE"),

    # 5) Performance
    "DM_STRING_CTOR":                       ("Dm", "PERFORMANCE"),
    "DM_NUMBER_CTOR":                       ("Dm", "PERFORMANCE"),
    "URF_UNREAD_FIELD":                     ("UrF", "PERFORMANCE"),
    "SIC_INNER_SHOULD_BE_STATIC":           ("SIC", "PERFORMANCE"),
    "SBSC_USE_STRINGBUFFER_CONCATENATION":  ("SBSC", "PERFORMANCE"),

    # 6) Style
    "DLS_DEAD_LOCAL_STORE":                 ("DLS", "STYLE"),
    "SF_SWITCH_FALLTHROUGH":                ("SF", "STYLE"),
    "REC_CATCH_EXCEPTION":                  ("REC", "STYLE"),
    "ICAST_INTEGER_MULTIPLY_CAST_TO_LONG":  ("ICAST", "STYLE"),

    # 7) Internationalization
    "DM_CONVERT_CASE":                      ("Dm", "I18N"),
    "DM_DEFAULT_ENCODING":                  ("Dm", "I18N"),
}

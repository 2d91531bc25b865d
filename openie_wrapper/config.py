"""
Configuration constants for the OpenIE wrapper.

Layout of the engine installation, binaries and workspace file names.
Binary locations and the engine directory can be overridden through
environment variables.
"""
import os

# -------- ENGINE CONFIGURATION --------

# Folder the engine distribution is unpacked into, next to the project
ENGINE_FOLDER = "stanford-openie"

# Engine installation directory (OPENIE_HOME overrides the project-relative default)
ENGINE_HOME = os.environ.get("OPENIE_HOME", ENGINE_FOLDER)

JAVA_BIN = os.environ.get("OPENIE_JAVA_BIN", "java")

# Passed to the JVM as -mx<HEAP_SIZE>
HEAP_SIZE = "4g"

# Jars are resolved relative to ENGINE_HOME, which is the working directory of the engine
CLASSPATH_ENTRIES = [
    "stanford-openie.jar",
    "stanford-openie-models.jar",
    "lib/*",
]

MAIN_CLASS = "edu.stanford.nlp.naturalli.OpenIE"

# Output format understood by engine/parser.py
OUTPUT_FORMAT = "ollie"

# -------- GRAPHVIZ CONFIGURATION --------

DOT_BIN = os.environ.get("OPENIE_DOT_BIN", "dot")
IMAGE_FORMAT = "png"

# -------- WORKSPACE CONFIGURATION --------

WORKSPACE_PREFIX = "openie-"
OUT_FILE = "out.txt"
ERR_FILE = "engine.err"
OUT_DOT = "out.dot"
# Rendered image is OUT_DOT with the image format as suffix, e.g. out.png

# Lines of engine stderr kept in EngineError messages
STDERR_TAIL_LINES = 20

# -------- INPUT CONFIGURATION --------

DEFAULT_INPUT_FILE = "samples.txt"
DEFAULT_INPUT_FILES = [DEFAULT_INPUT_FILE]


def default_classpath():
    """Join CLASSPATH_ENTRIES with the platform path separator."""
    return os.pathsep.join(CLASSPATH_ENTRIES)

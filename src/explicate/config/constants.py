"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable:
Java language facts and hard implementation limits.

For configurable values, see models.py (SynthesisConfig, RuleConfig, etc.).
"""

# =============================================================================
# Java Language Facts
# =============================================================================

IMPLICIT_PACKAGE = "java.lang"
"""Package whose public types are visible in every compilation unit without import."""

INFERRED_TYPE_KEYWORD = "var"
"""Reserved type name marking a local variable whose type is inferred (JDK 10+)."""

NESTED_CLASS_MARKER = "$"
"""Separator of binary names for compiler-synthesized nesting (``Outer$Inner``)."""

PRIMITIVE_TYPES: frozenset[str] = frozenset(
    {"boolean", "byte", "char", "short", "int", "long", "float", "double"}
)
"""The eight primitive type keywords."""

IMPLICIT_TYPE_NAMES: frozenset[str] = frozenset(
    {
        "AbstractMethodError",
        "Appendable",
        "ArithmeticException",
        "ArrayIndexOutOfBoundsException",
        "ArrayStoreException",
        "AssertionError",
        "AutoCloseable",
        "Boolean",
        "BootstrapMethodError",
        "Byte",
        "CharSequence",
        "Character",
        "Class",
        "ClassCastException",
        "ClassCircularityError",
        "ClassFormatError",
        "ClassLoader",
        "ClassNotFoundException",
        "ClassValue",
        "CloneNotSupportedException",
        "Cloneable",
        "Comparable",
        "Deprecated",
        "Double",
        "Enum",
        "EnumConstantNotPresentException",
        "Error",
        "Exception",
        "ExceptionInInitializerError",
        "Float",
        "FunctionalInterface",
        "IllegalAccessError",
        "IllegalAccessException",
        "IllegalArgumentException",
        "IllegalCallerException",
        "IllegalMonitorStateException",
        "IllegalStateException",
        "IllegalThreadStateException",
        "IncompatibleClassChangeError",
        "IndexOutOfBoundsException",
        "InheritableThreadLocal",
        "InstantiationError",
        "InstantiationException",
        "Integer",
        "InternalError",
        "InterruptedException",
        "Iterable",
        "LayerInstantiationException",
        "LinkageError",
        "Long",
        "MatchException",
        "Math",
        "Module",
        "ModuleLayer",
        "NegativeArraySizeException",
        "NoClassDefFoundError",
        "NoSuchFieldError",
        "NoSuchFieldException",
        "NoSuchMethodError",
        "NoSuchMethodException",
        "NullPointerException",
        "Number",
        "NumberFormatException",
        "Object",
        "OutOfMemoryError",
        "Override",
        "Package",
        "Process",
        "ProcessBuilder",
        "ProcessHandle",
        "Readable",
        "Record",
        "ReflectiveOperationException",
        "Runnable",
        "Runtime",
        "RuntimeException",
        "RuntimePermission",
        "SafeVarargs",
        "SecurityException",
        "SecurityManager",
        "Short",
        "StackOverflowError",
        "StackTraceElement",
        "StackWalker",
        "StrictMath",
        "String",
        "StringBuffer",
        "StringBuilder",
        "StringIndexOutOfBoundsException",
        "SuppressWarnings",
        "System",
        "Thread",
        "ThreadDeath",
        "ThreadGroup",
        "ThreadLocal",
        "Throwable",
        "TypeNotPresentException",
        "UnknownError",
        "UnsatisfiedLinkError",
        "UnsupportedClassVersionError",
        "UnsupportedOperationException",
        "VerifyError",
        "VirtualMachineError",
        "Void",
        "WrongThreadException",
    }
)
"""Simple names of the public top-level types of ``java.lang``."""

# =============================================================================
# Rule Metadata
# =============================================================================

RULE_ID = "UseExplicitTypes"
RULE_MINIMAL_JAVA_VERSION = "10"
RULE_TAGS: frozenset[str] = frozenset({"ImplicitToExplicit"})
RULE_SEE_URLS: tuple[str, ...] = (
    "https://openjdk.org/jeps/286",
    "https://pmd.github.io/latest/pmd_rules_java_codestyle.html#useexplicittypes",
)

# =============================================================================
# Internal Implementation Constants
# =============================================================================

MAX_TYPE_DEPTH_CEILING = 256
"""Absolute ceiling for synthesis recursion; SynthesisConfig.max_depth cannot exceed it."""

DEFAULT_TYPE_DEPTH = 32
"""Default synthesis recursion cap."""

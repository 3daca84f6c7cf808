"""Pytest configuration and shared fixtures."""

import pytest

from stacktrace import configure_logging, detect_capability

configure_logging(level="WARNING")


JUNIT_TRACE = """java.lang.AssertionError: expected:<1> but was:<2>
\tat org.junit.Assert.fail(Assert.java:86)
\tat org.junit.Assert.failNotEquals(Assert.java:834)
\tat com.example.CalculatorTest.testAdd(CalculatorTest.java:17)
\tat java.base/jdk.internal.reflect.NativeMethodAccessorImpl.invoke0(Native Method)
\tat org.junit.runners.model.FrameworkMethod$1.runReflectiveCall(FrameworkMethod.java:50)
\tat org.junit.runners.ParentRunner.access$000(ParentRunner.java:58)
\tat org.apache.maven.surefire.junit4.JUnit4TestSet.execute(JUnit4TestSet.java:53)
\t... 12 more"""


@pytest.fixture
def junit_trace() -> str:
    """A JUnit failure as printed on a Java 11 runtime."""
    return JUNIT_TRACE


@pytest.fixture(autouse=True)
def reset_capability_probe():
    """Keep environment changes in one test from leaking through the cached probe."""
    detect_capability.cache_clear()
    yield
    detect_capability.cache_clear()

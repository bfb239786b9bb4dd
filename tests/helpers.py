"""Session ids shared across the store tests."""

from filesession.naming import encode

SID = "testsessionid"
HEX_SID = encode(SID)

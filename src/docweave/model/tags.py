"""Tag names of the XML documentation comment format."""

SUMMARY = "summary"
REMARKS = "remarks"
PARAM = "param"
TYPEPARAM = "typeparam"
RETURNS = "returns"
VALUE = "value"
EXCEPTION = "exception"
EXAMPLE = "example"
SEEALSO = "seealso"

"""Domain layer - coded enum model and business enums.

The domain layer depends only on `src.core` and on Pydantic for the wire
contract of its types. It has NO dependencies on FastAPI or infrastructure.

Structure:
    coded_enums/    Registry and CodedEnum base class
    enums/          Concrete coded enums (registered on import)
    errors/         Error message templates and definition-time exceptions
    protocols/      Ports (CodedValue, LoggerProtocol)
    value_objects/  CodedEnumValue
    types.py        Annotated wire types (Int64String)
"""

class ValidationError(ValueError):
    pass


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)


def parse_record_id(value: int | str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid record id: {value!r}")
    if isinstance(value, int):
        record_id = value
    else:
        raw = str(value).strip()
        require(raw.isdecimal(), f"Invalid record id: {value!r}")
        record_id = int(raw)
    require(record_id > 0, f"Record id must be positive: {record_id}")
    return record_id

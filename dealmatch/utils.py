from datetime import date, datetime

from flask import request

from dealmatch.errors import InvalidArgument


def get_json_body():
    """Return the request's JSON object, or raise if it is missing or not an object."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgument('Invalid request body')
    return data


def row_to_dict(row):
    """Convert a result row into a JSON-ready dict, rendering timestamps as ISO-8601."""
    result = {}
    for key, value in row._mapping.items():
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        result[key] = value
    return result


def public_user(row):
    return {
        'id': row['id'],
        'email': row['email'],
        'userType': row['user_type'],
        'firstName': row['first_name'],
        'lastName': row['last_name'],
    }

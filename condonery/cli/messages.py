"""
User-facing messages shared by the parser, the commands and the logic layer.
"""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_PROPERTY_DISPLAYED_INDEX = "The property index provided is invalid"
MESSAGE_INVALID_CLIENT_DISPLAYED_INDEX = "The client index provided is invalid"
MESSAGE_ENTITIES_LISTED_OVERVIEW = "{count} {plural} listed!"
MESSAGE_CLIENT_NOT_FOUND = "Interested client not found: {}"
FILE_OPS_ERROR_MESSAGE = "Could not save data to file: "


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)

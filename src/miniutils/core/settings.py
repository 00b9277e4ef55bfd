"""
Project-wide constants that never change at runtime.
"""

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_ARGS = 2  # myunlink without any filenames

NAME_TOKEN = "%N"  # getmtime: replaced by the current filename

GETMTIME_USAGE = (
    "usage: getmtime FORMAT FILE [...]\n"
    "\n"
    "prints the mtime for each FILE given according to FORMAT\n"
    "FORMAT is any string valid for strftime(3)"
)
NO_URL_MESSAGE = "no URL provided"
NO_FILENAMES_MESSAGE = "no filenames provided"

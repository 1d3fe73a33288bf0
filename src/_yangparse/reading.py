import logging
import pathlib
from contextlib import contextmanager

from _yangparse.parser import parse
from _yangparse.scanner import YangScanner
from _yangparse.statement_keyword import STATEMENT_KEYWORDS

logger = logging.getLogger(__name__)


@contextmanager
def open_filelike(filelike):
    """
    Paths are opened in binary mode and closed on exit, anything else is
    assumed to be an open stream and is left open.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        logger.debug("Reading yang document from %s", filelike)
        with open(filelike, "rb") as file_stream:
            yield file_stream
    else:
        yield filelike


def read_buffer(filelike):
    with open_filelike(filelike) as stream:
        return stream.read()


def read(filelike, keywords=STATEMENT_KEYWORDS):
    """
    Reads a yang document and returns its syntax tree, ie.
    tree = read("/my/module.yang").

    :param filelike: A path, or a binary or text stream.
    :param keywords: Collection of recognized statement keywords.
    """
    return parse(read_buffer(filelike), keywords)


def read_tokens(filelike):
    """
    Reads a yang document and returns the list of its tokens.

    :param filelike: A path, or a binary or text stream.
    """
    return list(YangScanner(read_buffer(filelike)))

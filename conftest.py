import logging

import pytest

from html5_tree.dom import Document, Node


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def sample_tree(document):
    """Document -> html -> {head -> title -> "Hello world", body -> p}."""
    root_id = document.get_root().id
    ids = {}
    ids["html"] = document.add_node(Node.new_element("html"), root_id)
    ids["head"] = document.add_node(Node.new_element("head"), ids["html"])
    ids["body"] = document.add_node(Node.new_element("body"), ids["html"])
    ids["title"] = document.add_node(Node.new_element("title"), ids["head"])
    ids["title_text"] = document.add_node(Node.new_text("Hello world"), ids["title"])
    ids["p"] = document.add_node(Node.new_element("p"), ids["body"])
    return document, ids


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("html5_tree")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)

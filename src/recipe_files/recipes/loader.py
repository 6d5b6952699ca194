"""
YAML loading for recipe files.

Recipe file fields are read with the exact text of their scalars, so values
such as ``platformVersion: 20.10`` or ``default: yes`` reach the models
unchanged. Only the free-form ``install`` section is built with the usual
safe-loader types.
"""

from typing import Any, Dict, Optional, Union
import logging

import yaml
from yaml.constructor import ConstructorError


logger = logging.getLogger(__name__)

NULL_TAG = "tag:yaml.org,2002:null"


class RecipeFileLoader(yaml.SafeLoader):
    """SafeLoader that keeps scalar text outside the install section."""

    def construct_raw(self, node: yaml.Node) -> Any:
        """Build plain dicts, lists and scalar text from a node."""
        if isinstance(node, yaml.ScalarNode):
            if node.tag == NULL_TAG:
                return None
            return node.value
        if isinstance(node, yaml.SequenceNode):
            return [self.construct_raw(child) for child in node.value]

        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            mapping[self.construct_key(key_node)] = self.construct_raw(value_node)
        return mapping

    def construct_key(self, node: yaml.Node) -> Optional[str]:
        if not isinstance(node, yaml.ScalarNode):
            raise ConstructorError(
                "while constructing a mapping", None,
                "found a non-scalar key", node.start_mark,
            )
        return self.construct_raw(node)

    def construct_install(self, node: yaml.Node) -> Any:
        """Build the install section with typed values and text keys."""
        if not isinstance(node, yaml.MappingNode):
            return self.construct_object(node, deep=True)

        self.flatten_mapping(node)
        install = {}
        for key_node, value_node in node.value:
            key = self.construct_key(key_node)
            install["" if key is None else key] = self.construct_object(value_node, deep=True)
        return install

    def construct_recipe_file(self, node: yaml.MappingNode) -> Dict[str, Any]:
        self.flatten_mapping(node)
        data = {}
        for key_node, value_node in node.value:
            key = self.construct_key(key_node)
            if key == "install":
                data[key] = self.construct_install(value_node)
            else:
                data[key] = self.construct_raw(value_node)
        return data


def load_recipe_document(content: Union[str, bytes]) -> Any:
    """Load a single YAML document in recipe file form.

    Returns:
        The document's mapping, None for an empty document, or the
        safe-loaded value when the document is not a mapping

    Raises:
        yaml.YAMLError: If the content is not valid YAML
    """
    loader = RecipeFileLoader(content)
    try:
        node = loader.get_single_node()
        if node is None:
            return None
        if not isinstance(node, yaml.MappingNode):
            return loader.construct_document(node)
        return loader.construct_recipe_file(node)
    finally:
        loader.dispose()

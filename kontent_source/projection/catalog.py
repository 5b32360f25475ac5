"""Fixed GraphQL declarations shared by every Kontent project.

The element value types declared here must stay in step with
``ElementKind``; ``ELEMENT_VALUE_TYPES`` is the lookup the type projection
uses for every element it declares.
"""

from kontent_source.models.elements import ElementKind
from kontent_source.models.graph import ObjectTypeDef
from kontent_source.projection.naming import to_element_value_type_name

ITEM_INTERFACE = "KontentItem"
ELEMENT_INTERFACE = "KontentElement"
SYSTEM_TYPE = "KontentItemSystem"
NODE_INTERFACE = "Node"

ELEMENT_VALUE_TYPES: dict[ElementKind, str] = {
    kind: to_element_value_type_name(kind.value) for kind in ElementKind
}

BASE_TYPE_DEFS = """
interface KontentItem @nodeInterface {
  id: ID!
  system: KontentItemSystem!
}

interface KontentElement @dontInfer {
  name: String!
  type: String!
}

type KontentItemSystem @infer {
  codename: String!
  id: String!
  language: String!
  lastModified: Date! @dateformat
  name: String!
  type: String!
}

type KontentAsset @infer {
  name: String!
  description: String
  type: String!
  size: Int!
  url: String!
  width: Int
  height: Int
}

type KontentAssetElement implements KontentElement @infer {
  name: String!
  type: String!
  value: [KontentAsset]
}

type KontentDateTimeElement implements KontentElement @infer {
  name: String!
  type: String!
  value: Date @dateformat
}

type KontentModularContentElement implements KontentElement @infer {
  name: String!
  type: String!
  value: [KontentItem] @link(by: "system.codename")
}

type KontentMultipleChoiceElement implements KontentElement @infer {
  name: String!
  type: String!
}

type KontentNumberElement implements KontentElement @infer {
  name: String!
  type: String!
  value: Float
}

type KontentRichTextElement implements KontentElement @infer {
  name: String!
  type: String!
  value: String
  images: [KontentRichTextImage]
  links: [KontentRichTextLink]
  linkedItems: [KontentItem] @link(by: "system.codename")
}

type KontentRichTextImage @infer {
  description: String
  height: Int
  imageId: String!
  url: String!
  width: Int
}

type KontentRichTextLink @infer {
  codename: String!
  linkId: String!
  type: String!
  urlSlug: String
}

type KontentTaxonomyElement implements KontentElement @infer {
  name: String!
  type: String!
  taxonomyGroup: String!
  value: [KontentTaxonomyItem]
}

type KontentTaxonomyItem @infer {
  name: String!
  codename: String!
}

type KontentTextElement implements KontentElement @infer {
  name: String!
  type: String!
  value: String
}

type KontentUrlSlugElement implements KontentElement @infer {
  name: String!
  type: String!
  value: String
}
"""


def generic_element_type_name(kind: str) -> str:
    """Value type name for an element kind outside the catalog.

    Kinds that only differ from a catalog kind in spelling (``RichText``)
    would otherwise share its name while carrying a string value.
    """
    name = to_element_value_type_name(kind)
    if name in ELEMENT_VALUE_TYPES.values():
        return to_element_value_type_name(f"unknown_{kind}")
    return name


def generic_element_type(kind: str) -> ObjectTypeDef:
    """String-valued value type for an element kind outside the catalog."""
    return ObjectTypeDef(
        name=generic_element_type_name(kind),
        fields={"name": "String!", "type": "String!", "value": "String"},
        interfaces=[ELEMENT_INTERFACE],
        infer=True,
    )

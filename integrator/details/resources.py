import os

from typing import Dict

# Resource source extension -> extension of the compiled output
COMPILED_RESOURCE_EXTENSIONS: Dict[str, str] = {
    ".storyboard": ".storyboardc",
    ".xib": ".nib",
    ".xcdatamodel": ".mom",
    ".xcdatamodeld": ".momd",
    ".xcmappingmodel": ".cdm",
    ".xcassets": ".car",
}

# Asset catalogs are compiled by the consumer's resources phase, never rewritten
_CONSUMER_COMPILED_EXTENSIONS = frozenset({".xcassets"})


def output_extension_for_resource(input_extension: str) -> str:
    return COMPILED_RESOURCE_EXTENSIONS.get(input_extension, input_extension)


def resource_extension_compilable(input_extension: str) -> bool:
    return (
        output_extension_for_resource(input_extension) != input_extension
        and input_extension not in _CONSUMER_COMPILED_EXTENSIONS
    )


def compiled_resource_path(resource_path: str, built_product_dir: str) -> str:
    """
    Point a compilable resource at its compiled output inside a built product.

    Args:
        resource_path: The resource as declared by the component.
        built_product_dir: The product directory the resource is compiled into.

    Returns:
        ``<built_product_dir>/<stem><compiled extension>`` for compilable
        resources, otherwise ``resource_path`` unchanged.
    """
    stem, extension = os.path.splitext(os.path.basename(resource_path.rstrip("/")))
    if not resource_extension_compilable(extension):
        return resource_path
    return f"{built_product_dir}/{stem}{output_extension_for_resource(extension)}"

"""Detection capabilities and their text templates.

Each capability pairs one Cloud Vision feature with the part of the response
that carries its results and a template that renders one result as text.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from google.cloud import vision
from google.protobuf import text_format
from google.protobuf.descriptor import FieldDescriptor
from google.protobuf.message import Message

Response = vision.AnnotateImageResponse


@dataclass(frozen=True, slots=True)
class Capability:
    """A single-feature detection: what to ask for and how to print it."""

    name: str
    feature: vision.Feature.Type
    entries: Callable[[Response], Sequence[Any]]
    render: Callable[[Any], str]


def likelihood_name(value: int) -> str:
    """Render a likelihood enum as its name, e.g. VERY_UNLIKELY."""
    return vision.Likelihood(value).name


def format_polygon(poly: vision.BoundingPoly) -> str:
    """Render a bounding polygon as (x,y),(x,y),..."""
    if poly.vertices:
        return ",".join(f"({v.x},{v.y})" for v in poly.vertices)
    return ",".join(f"({v.x:g},{v.y:g})" for v in poly.normalized_vertices)


def _is_repeated(value: Any) -> bool:
    # Repeated containers differ between protobuf backends; anything that is
    # neither a message nor a scalar is one
    return not isinstance(value, (Message, str, bytes, int, float))


def _format_field(field: FieldDescriptor, value: Any) -> str:
    if _is_repeated(value):
        return "[" + ", ".join(_format_scalar(field, item) for item in value) + "]"
    return _format_scalar(field, value)


def _format_scalar(field: FieldDescriptor, value: Any) -> str:
    if field.type == FieldDescriptor.TYPE_MESSAGE:
        return text_format.MessageToString(value, as_one_line=True)
    if field.type in (FieldDescriptor.TYPE_FLOAT, FieldDescriptor.TYPE_DOUBLE):
        return f"{value:g}"
    return str(value)


def render_face(face: vision.FaceAnnotation) -> str:
    return (
        f"anger: {likelihood_name(face.anger_likelihood)}\n"
        f"joy: {likelihood_name(face.joy_likelihood)}\n"
        f"surprise: {likelihood_name(face.surprise_likelihood)}\n"
        f"position: {format_polygon(face.bounding_poly)}"
    )


def render_fields(entity: vision.EntityAnnotation) -> str:
    """Render every field set on an entity, one `name : value` per line."""
    pb = vision.EntityAnnotation.pb(entity)
    return "\n".join(
        f"{field.name} : {_format_field(field, value)}"
        for field, value in pb.ListFields()
    )


def render_landmark(entity: vision.EntityAnnotation) -> str:
    text = f"Landmark: {entity.description}"
    if entity.locations:
        lat_lng = entity.locations[0].lat_lng
        text += f"\n {lat_lng.latitude},{lat_lng.longitude}"
    return text


def render_logo(entity: vision.EntityAnnotation) -> str:
    return entity.description


def render_text(entity: vision.EntityAnnotation) -> str:
    return (
        f"Text: {entity.description}\n"
        f"Position : {format_polygon(entity.bounding_poly)}"
    )


def render_color(info: vision.ColorInfo) -> str:
    color = info.color
    return (
        f"fraction: {info.pixel_fraction:f}\n"
        f"r: {color.red:f}, g: {color.green:f}, b: {color.blue:f}"
    )


def render_safe_search(annotation: vision.SafeSearchAnnotation) -> str:
    return (
        f"adult: {likelihood_name(annotation.adult)}\n"
        f"medical: {likelihood_name(annotation.medical)}\n"
        f"spoofed: {likelihood_name(annotation.spoof)}\n"
        f"violence: {likelihood_name(annotation.violence)}"
    )


Feature = vision.Feature.Type

CAPABILITIES: dict[str, Capability] = {
    capability.name: capability
    for capability in (
        Capability(
            name="faces",
            feature=Feature.FACE_DETECTION,
            entries=lambda r: r.face_annotations,
            render=render_face,
        ),
        Capability(
            name="labels",
            feature=Feature.LABEL_DETECTION,
            entries=lambda r: r.label_annotations,
            render=render_fields,
        ),
        Capability(
            name="landmarks",
            feature=Feature.LANDMARK_DETECTION,
            entries=lambda r: r.landmark_annotations,
            render=render_landmark,
        ),
        Capability(
            name="logos",
            feature=Feature.LOGO_DETECTION,
            entries=lambda r: r.logo_annotations,
            render=render_logo,
        ),
        Capability(
            name="text",
            feature=Feature.TEXT_DETECTION,
            entries=lambda r: r.text_annotations,
            render=render_text,
        ),
        Capability(
            name="safe-search",
            feature=Feature.SAFE_SEARCH_DETECTION,
            # One annotation per image rather than a list
            entries=lambda r: [r.safe_search_annotation],
            render=render_safe_search,
        ),
        Capability(
            name="properties",
            feature=Feature.IMAGE_PROPERTIES,
            entries=lambda r: r.image_properties_annotation.dominant_colors.colors,
            render=render_color,
        ),
    )
}


def get_capability(name: str) -> Capability | None:
    """Look up a capability by its command name."""
    return CAPABILITIES.get(name)

"""Assembly of SVG documents from path geometry"""

__all__ = ['render_svg']

from html import escape
from typing import Optional, Union

from geosvg._const import SVG_NAMESPACE
from geosvg.options import SvgStyle
from geosvg.utils.functions import format_number


def _attr(value: Union[float, str]) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)

    return escape(str(value), quote=True)


def render_svg(
    width: float,
    height: float,
    path: str,
    style: Optional[SvgStyle] = None
) -> str:
    """
    Wraps path geometry into a standalone SVG document with a single path
    element.

    Args:
        width:
            The document width, also used for the viewBox

        height:
            The document height, also used for the viewBox

        path:
            The path geometry ('d' attribute)

        style: (Optional)
            The presentation attributes of the path. Defaults to SvgStyle().

    Returns:
        str
    """
    style = style or SvgStyle()
    w, h = _attr(width), _attr(height)
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" width="{w}" height="{h}" viewBox="0 0 {w} {h}">\n'
        f'  <path d="{_attr(path)}" fill="{_attr(style.fill)}" stroke="{_attr(style.stroke)}" '
        f'stroke-width="{_attr(style.stroke_width)}" '
        f'stroke-linecap="{_attr(style.stroke_linecap)}" '
        f'stroke-miterlimit="{_attr(style.stroke_miterlimit)}"/>\n'
        '</svg>'
    )

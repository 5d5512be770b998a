"""
Configuration records for the geosvg pipeline.

Each record is immutable; derive variants with model_copy, e.g.

    options = PathOptions(scale=1000)
    straight = options.model_copy(update={'smooth': False})
"""

__all__ = ['PathOptions', 'SvgOptions', 'SvgStyle']

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from geosvg._const import DEFAULT_ACCURACY, DEFAULT_SMOOTH, DEFAULT_SMOOTHING


class PathOptions(BaseModel):
    """
    Options controlling projection and path synthesis.

    Attributes:
        smooth:
            Draw a curve (True) or straight lines (False). Default True.

        smoothing:
            Curve tension, as a fraction of the chord between a point's
            neighbours. Default 0.2.

        accuracy:
            Rounding step applied to distance measurements, in meters.
            Default 0.001.

        scale:
            Target size of the longer output dimension. Default None, which
            keeps the dimensions in meters.
    """
    model_config = ConfigDict(frozen=True)

    smooth: bool = DEFAULT_SMOOTH
    smoothing: float = DEFAULT_SMOOTHING
    accuracy: float = DEFAULT_ACCURACY
    scale: Optional[float] = None


class SvgStyle(BaseModel):
    """Presentation attributes written onto the SVG path element"""
    model_config = ConfigDict(frozen=True)

    stroke: str = 'red'
    stroke_width: Union[float, str] = 4
    stroke_linecap: str = 'round'
    stroke_miterlimit: Union[float, str] = 4
    fill: str = 'none'


class SvgOptions(PathOptions):
    """PathOptions plus the styling of the rendered document"""

    style: SvgStyle = Field(default_factory=SvgStyle)

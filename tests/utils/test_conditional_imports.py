import pytest

import geosvg  # noqa: F401  registers the import hook
from geosvg.utils.conditional_imports import ConditionalPackageInterceptor


def test_permit_packages():
    ConditionalPackageInterceptor.permit_packages(['_geosvg_listed_pkg'])
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['_geosvg_listed_pkg'] == '_geosvg_listed_pkg'

    with pytest.raises(TypeError):
        ConditionalPackageInterceptor.permit_packages('gpxpy')


def test_gpxpy_is_registered():
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['gpxpy'] == 'geosvg[gpx]'


def test_missing_optional_package():
    ConditionalPackageInterceptor.permit_packages({'_geosvg_missing_pkg': 'geosvg[missing]'})
    with pytest.raises(ModuleNotFoundError, match=r'pip install geosvg\[missing\]'):
        import _geosvg_missing_pkg  # noqa: F401


def test_unregistered_package():
    assert ConditionalPackageInterceptor.find_spec('_geosvg_unknown_pkg', None) is None

    with pytest.raises(ModuleNotFoundError):
        import _geosvg_unknown_pkg  # noqa: F401

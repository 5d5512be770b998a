"""
Intercepts import errors concerning optional imports in order to tell the user
which extra to install.
"""

__all__ = ['ConditionalPackageInterceptor']

from typing import Union


class ConditionalPackageInterceptor:
    """
    Import hook that turns a missing optional package into a readable error.
    Only packages registered with .permit_packages() are intercepted; any other
    missing module falls through to the usual ModuleNotFoundError.

    To use:
        In your code's entrypoint, add the following code:

            ConditionalPackageInterceptor.permit_packages(
                <list or dict of packages>
            )
            sys.meta_path.append(ConditionalPackageInterceptor)

    The hook must be appended (not inserted) so that importlib only reaches it
    after every real finder has failed.
    """

    PERMITTED_PACKAGES: dict = {}

    @classmethod
    def permit_packages(cls, packages: Union[list, dict]) -> None:
        """
        Registers optional packages along with the pip requirement that
        provides them.

        You can add to this list in two ways:
            As a list: the requirement is the import name
                ["gpxpy"]
                "import gpxpy" -> pip install gpxpy

            As a dict: the requirement is the corresponding value
                {"gpxpy": "geosvg[gpx]"}
                "import gpxpy" -> pip install geosvg[gpx]

        Args:
            packages (Union[list, dict]): The optional packages

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        Called by importlib once every other finder on sys.meta_path has failed
        to locate a module.

        Args:
            name (str): The name of the package
            path:
            target:

        Returns:
            None for packages that are not registered
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        raise ModuleNotFoundError(
            f"You are attempting to use a module which requires an optional installation ({name}). "
            "Please install it with the following command: \n"
            f"    pip install {cls.PERMITTED_PACKAGES[name]}",
            name=name,
        )

# This source code is part of the fastakit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import doctest
import tempfile
from importlib import import_module
import pytest


@pytest.mark.parametrize("package_name, context_package_names", [
    pytest.param(
        "fastakit",
        []
    ),
])
def test_doctest(package_name, context_package_names):
    """
    Run all doctest strings in all modules of the package.
    """
    # Collect all attributes of this package and its subpackages
    # as globals for the doctests
    globs = {}
    mod_names = []
    package = import_module(package_name)
    mod_names += _list_modules(package)
    for name in context_package_names:
        context_package = import_module(name)
        globs.update(
            {attr : getattr(context_package, attr)
             for attr in dir(context_package)}
        )
    globs.update(
        {attr : getattr(package, attr) for attr in dir(package)}
    )
    with tempfile.TemporaryDirectory() as path_to_directory:
        globs["path_to_directory"] = path_to_directory
        # Run doctests
        for mod_name in mod_names:
            mod = import_module(mod_name)
            results = doctest.testmod(
                mod, extraglobs=globs,
                optionflags=doctest.ELLIPSIS | doctest.REPORT_ONLY_FIRST_FAILURE,
                verbose=False, report=False
            )
            try:
                assert results.failed == 0
            except AssertionError:
                print(f"Failing doctest in module {mod}")
                raise


def _list_modules(package):
    """
    List the names of the modules of the given package.
    """
    modules = []
    for module_name in dir(package):
        module = getattr(package, module_name)
        if type(module).__name__ == "module":
            modules.append(module_name)
    return [f"{package.__name__}.{module_name}" for module_name in modules]

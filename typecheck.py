# This source code is part of the fastakit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Check the package modules and their stub files with *mypy* and print
the errors grouped by module.
"""

import glob
import re
import mypy.api as mypy


def module_from_file(file_name):
    return file_name.replace("src/", "") \
                    .replace(".pyi", "") \
                    .replace(".py", "") \
                    .replace("/", ".") \
                    .replace(".__init__", "")


def print_errors(err_dict):
    for module, errors in err_dict.items():
        print(module)
        for line, msg in errors:
            print(f"{line}:\t{msg}")
        print()


# The modules import each other with '*'
ignore_patterns = [
    re.compile(r"Name '.*' already defined \(by an import\)")
]
py_dict = {}
pyi_dict = {}

for file in glob.glob("src/fastakit/*.py"):
    out, _, _ = mypy.run(["--ignore-missing-imports", file])
    for err in out.split("\n"):
        fields = err.split(":", maxsplit=3)
        if len(fields) < 4 or fields[2].strip() != "error":
            continue
        file_name, line, _, msg = [field.strip() for field in fields]
        if any([pattern.match(msg) for pattern in ignore_patterns]):
            continue
        err_dict = pyi_dict if file_name.endswith(".pyi") else py_dict
        errors = err_dict.setdefault(module_from_file(file_name), [])
        if (line, msg) not in errors:
            errors.append((line, msg))


print("Code:")
print_errors(py_dict)
print()
print()
print("Stubs:")
print_errors(pyi_dict)

"""Build order for a small set of packages.

This example sorts packages so that every package is built after the
packages it depends on, first as a flat order, then as regions of packages
that can be built in parallel.
"""

import orderly

# Direct dependencies of each package
requirements = {
    "app": ["web", "db"],
    "web": ["http", "log"],
    "db": ["log"],
    "http": [],
    "log": [],
}


def dependencies_of(package: str) -> list[str]:
    return requirements.get(package, [])


if __name__ == "__main__":
    # Only "app" is requested; its dependencies are pulled in transitively
    order = orderly.topological_sort(["app"], dependencies_of, include_dependencies=True)
    print("Build order:", " -> ".join(order))

    for i, region in enumerate(orderly.topological_region_sort(["app"], dependencies_of, include_dependencies=True)):
        print(f"Stage {i}: {', '.join(region)}")

    # A cycle cannot be ordered
    requirements["log"] = ["app"]
    try:
        orderly.topological_sort(requirements, dependencies_of)
    except orderly.UnsatisfiableDependencyGraph as e:
        print("Cannot order:", e.elements)

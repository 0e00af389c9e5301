"""Render icon component source (.tsx) from extracted path data.

Output is a pure function of (component name, path data) so regenerating an
icon produces byte-identical files.
"""

from __future__ import annotations

from pix31.models.generation import GeneratedComponent


def generate_react_component(component_name: str, path_data: list[str]) -> str:
    """Web variant: plain <path> elements filled with currentColor."""
    path_elements = "\n".join(f'      <path d="{d}" fill="currentColor"/>' for d in path_data)

    lines = [
        "import React from 'react';",
        "import { Icon, IconProps } from './index';",
        "",
        f"export const {component_name} = React.forwardRef<SVGSVGElement, IconProps>(({{",
        "  ...props",
        "}, ref) => {",
        "  return (",
        "    <Icon ref={ref} {...props}>",
        path_elements,
        "    </Icon>",
        "  );",
        "}) as React.ForwardRefExoticComponent<IconProps & React.RefAttributes<SVGSVGElement>>;",
        "",
        f'{component_name}.displayName = "{component_name}";',
        "",
    ]
    return "\n".join(lines)


def generate_react_native_component(component_name: str, path_data: list[str]) -> str:
    """Native variant: react-native-svg <Path>, fill follows the color prop."""
    lines = [
        "import React from 'react';",
        "import { Path } from 'react-native-svg';",
        "import { Icon, IconProps } from './index';",
        "",
        f"export const {component_name} = React.forwardRef<any, IconProps>(({{",
        "  ...props",
        "}, ref) => {",
        "  return (",
        "    <Icon ref={ref} {...props}>",
    ]
    lines.extend(f'      <Path d="{d}" fill={{props.color ?? "currentColor"}} />' for d in path_data)
    lines += [
        "    </Icon>",
        "  );",
        "});",
        "",
        f'{component_name}.displayName = "{component_name}";',
        "",
    ]
    return "\n".join(lines)


def render_component(platform: str, component_name: str, path_data: list[str]) -> str:
    if platform == "native":
        return generate_react_native_component(component_name, path_data)
    return generate_react_component(component_name, path_data)


def build_component(platform: str, icon_name: str, component_name: str, path_data: list[str]) -> GeneratedComponent:
    return GeneratedComponent(
        icon_name=icon_name,
        component_name=component_name,
        source=render_component(platform, component_name, path_data),
    )

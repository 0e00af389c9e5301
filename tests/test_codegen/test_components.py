"""Tests for component rendering."""

from __future__ import annotations

from pix31.codegen.components import (
    build_component,
    generate_react_component,
    generate_react_native_component,
    render_component,
)
from pix31.svg.parser import extract_svg_path
from tests.conftest import BOX_PATH, HOME_PATH


class TestReactComponent:
    def test_single_path(self):
        result = generate_react_component("HomeIcon", [HOME_PATH])
        assert result == f"""import React from 'react';
import {{ Icon, IconProps }} from './index';

export const HomeIcon = React.forwardRef<SVGSVGElement, IconProps>(({{
  ...props
}}, ref) => {{
  return (
    <Icon ref={{ref}} {{...props}}>
      <path d="{HOME_PATH}" fill="currentColor"/>
    </Icon>
  );
}}) as React.ForwardRefExoticComponent<IconProps & React.RefAttributes<SVGSVGElement>>;

HomeIcon.displayName = "HomeIcon";
"""

    def test_multi_path_keeps_order(self):
        result = generate_react_component("ComplexIcon", [HOME_PATH, BOX_PATH])
        first = result.index(f'<path d="{HOME_PATH}"')
        second = result.index(f'<path d="{BOX_PATH}"')
        assert first < second
        assert result.count('fill="currentColor"') == 2

    def test_empty_paths(self):
        result = generate_react_component("EmptyIcon", [])
        assert "<path" not in result
        assert "<Icon ref={ref} {...props}>" in result
        assert "</Icon>" in result

    def test_deterministic(self):
        assert generate_react_component("HomeIcon", [HOME_PATH]) == generate_react_component("HomeIcon", [HOME_PATH])


class TestReactNativeComponent:
    def test_multi_path(self):
        result = generate_react_native_component("ComplexIcon", [HOME_PATH, BOX_PATH])
        assert result == f"""import React from 'react';
import {{ Path }} from 'react-native-svg';
import {{ Icon, IconProps }} from './index';

export const ComplexIcon = React.forwardRef<any, IconProps>(({{
  ...props
}}, ref) => {{
  return (
    <Icon ref={{ref}} {{...props}}>
      <Path d="{HOME_PATH}" fill={{props.color ?? "currentColor"}} />
      <Path d="{BOX_PATH}" fill={{props.color ?? "currentColor"}} />
    </Icon>
  );
}});

ComplexIcon.displayName = "ComplexIcon";
"""

    def test_empty_paths(self):
        result = generate_react_native_component("EmptyIcon", [])
        assert "    <Icon ref={ref} {...props}>\n    </Icon>\n" in result
        assert "<Path " not in result


def test_render_dispatch():
    assert "<Path " in render_component("native", "HomeIcon", [HOME_PATH])
    assert "<path " in render_component("web", "HomeIcon", [HOME_PATH])


def test_build_component():
    component = build_component("web", "home", "HomeIcon", [HOME_PATH])
    assert component.icon_name == "home"
    assert component.component_name == "HomeIcon"
    assert 'HomeIcon.displayName = "HomeIcon";' in component.source


def test_rendered_path_round_trip():
    rendered = generate_react_component("HomeIcon", [HOME_PATH])
    inner = next(line.strip() for line in rendered.splitlines() if line.strip().startswith("<path"))
    assert extract_svg_path(f"<svg>{inner}</svg>") == [HOME_PATH]

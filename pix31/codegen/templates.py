"""Static header templates for the generated barrel file."""

from __future__ import annotations

REACT_INDEX_TEMPLATE = """import React from "react";
import { cn } from "@lib/utils";

export interface IconProps extends React.SVGProps<SVGSVGElement> {
  size?: number;
}

export const Icon = React.forwardRef<SVGSVGElement, IconProps>(
  ({ size = 24, className, ...props }, ref) => {
    return (
      <svg
        ref={ref}
        fill="none"
        xmlns="http://www.w3.org/2000/svg"
        viewBox="0 0 24 24"
        width={size}
        height={size}
        className={cn(className)}
        {...props}
      />
    );
  }
);

Icon.displayName = "Icon";
"""

REACT_NATIVE_INDEX_TEMPLATE = """import React from "react";
import Svg, { SvgProps } from "react-native-svg";

export interface IconProps extends SvgProps {
  size?: number;
}

export const Icon = React.forwardRef<Svg, IconProps>(
  ({ size = 24, width, height, viewBox = "0 0 24 24", ...props }, ref) => {
    return (
      <Svg
        ref={ref}
        width={width ?? size}
        height={height ?? size}
        viewBox={viewBox}
        {...props}
      />
    );
  }
);

Icon.displayName = "Icon";
"""


def index_template(platform: str) -> str:
    return REACT_NATIVE_INDEX_TEMPLATE if platform == "native" else REACT_INDEX_TEMPLATE

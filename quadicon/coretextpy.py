# this_file: quadicon/coretextpy.py
"""
macOS glyph source that asks CoreText for outlines through a small Swift script.
"""

from __future__ import annotations

import os
import platform
import shutil
from pathlib import Path

from .base import BaseGlyphSource, GlyphSourceUnavailableError
from .constants import FONT_NAME, GLYPH_UNITS_PER_EM, SWIFT_MODULE_CACHE, SWIFT_TOOL_NAME

SWIFT_TOOL_SOURCE = r"""#!/usr/bin/env swift
import CoreText
import CoreGraphics
import Foundation

struct GlyphRecord: Codable {
    let path: String
    let advance: Double
    let minX: Double
    let maxX: Double
    let height: Double
}

func number(_ value: CGFloat) -> String {
    let formatter = NumberFormatter()
    formatter.minimumFractionDigits = 0
    formatter.maximumFractionDigits = 3
    formatter.minimumIntegerDigits = 1
    formatter.decimalSeparator = "."
    return formatter.string(from: NSNumber(value: Double(value))) ?? "0"
}

func point(_ p: CGPoint) -> String {
    return "\(number(p.x)) \(number(p.y))"
}

func describe(_ path: CGPath) -> String {
    var parts: [String] = []
    path.applyWithBlock { element in
        let pts = element.pointee.points
        switch element.pointee.type {
        case .moveToPoint:
            parts.append("M \(point(pts[0]))")
        case .addLineToPoint:
            parts.append("L \(point(pts[0]))")
        case .addQuadCurveToPoint:
            parts.append("Q \(point(pts[0])) \(point(pts[1]))")
        case .addCurveToPoint:
            parts.append("C \(point(pts[0])) \(point(pts[1])) \(point(pts[2]))")
        case .closeSubpath:
            parts.append("Z")
        @unknown default:
            break
        }
    }
    return parts.joined(separator: " ")
}

let args = CommandLine.arguments
guard args.count >= 3 else {
    FileHandle.standardError.write(Data("Usage: glyph-to-path <FONT_NAME> <TEXT>\n".utf8))
    exit(1)
}

let font = CTFontCreateWithName(args[1] as CFString, CGFloat(__UNITS__), nil)
var records: [GlyphRecord] = []

for scalar in args[2].unicodeScalars {
    var unit = UniChar(scalar.value)
    var glyph = CGGlyph()
    guard CTFontGetGlyphsForCharacters(font, &unit, &glyph, 1) else {
        continue
    }
    var advance = CGSize.zero
    CTFontGetAdvancesForGlyphs(font, .horizontal, &glyph, &advance, 1)
    guard var path = CTFontCreatePathForGlyph(font, glyph, nil) else {
        records.append(GlyphRecord(path: "", advance: Double(advance.width), minX: 0, maxX: Double(advance.width), height: 0))
        continue
    }
    var flip = CGAffineTransform(scaleX: 1, y: -1)
    if let flipped = path.copy(using: &flip) {
        path = flipped
    }
    let inkBox = path.boundingBox
    var shift = CGAffineTransform(translationX: 0, y: -inkBox.minY)
    if let shifted = path.copy(using: &shift) {
        path = shifted
    }
    records.append(GlyphRecord(
        path: describe(path),
        advance: Double(advance.width),
        minX: Double(inkBox.minX),
        maxX: Double(inkBox.maxX),
        height: Double(path.boundingBox.maxY)
    ))
}

guard let data = try? JSONEncoder().encode(records) else {
    exit(1)
}
FileHandle.standardOutput.write(data)
""".replace("__UNITS__", str(GLYPH_UNITS_PER_EM))


class CoreTextGlyphSource(BaseGlyphSource):
    """
    Glyph source backed by CoreText, run through the ``swift`` interpreter.

    The Swift script and its module cache live under ``helper_dir`` and are
    created on first use.
    """

    engine = "coretext"

    def __init__(self, font_name: str = FONT_NAME, **kwargs):
        if not self.is_available():
            raise GlyphSourceUnavailableError(
                "CoreText glyph source requires macOS with the swift toolchain on PATH."
            )
        super().__init__(**kwargs)
        self.font_name = font_name

    @classmethod
    def is_available(cls) -> bool:
        """Check if CoreText glyph source is available (macOS with swift)."""
        return platform.system() == "Darwin" and shutil.which("swift") is not None

    @property
    def tool_path(self) -> Path:
        return self.helper_dir / SWIFT_TOOL_NAME

    @property
    def module_cache_dir(self) -> Path:
        return self.helper_dir / SWIFT_MODULE_CACHE

    def prepare(self) -> None:
        """Write the Swift script once and make sure the module cache exists."""
        self.module_cache_dir.mkdir(parents=True, exist_ok=True)
        if not self.tool_path.exists():
            self.tool_path.write_text(SWIFT_TOOL_SOURCE, encoding="utf-8")

    def environment(self) -> dict[str, str] | None:
        env = dict(os.environ)
        env["SWIFT_MODULE_CACHE_PATH"] = str(self.module_cache_dir)
        return env

    def build_command(self, text: str) -> list[str]:
        return [
            "swift",
            "-module-cache-path",
            str(self.module_cache_dir),
            str(self.tool_path),
            self.font_name,
            text,
        ]

    def summary(self):
        info = super().summary()
        info["font"] = self.font_name
        return info

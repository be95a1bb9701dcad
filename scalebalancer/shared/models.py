"""
Core data models for the scale balancer.

These models define pans, scales, the two kinds of scale side and the
registry that owns every scale built while parsing.
"""

from typing import Annotated, ClassVar, Iterator, Literal, Optional, Protocol, Union

from pydantic import BaseModel, Field

from scalebalancer.shared.exceptions import UnresolvedReferenceError


# =============================================================================
# Weighable units
# =============================================================================

class Weighable(Protocol):
    """Anything that carries a mass and a counterweight."""
    
    mass: int
    balance_mass: int


class Pan(BaseModel):
    """A weighable unit holding a fixed mass and a computed counterweight."""
    
    DEFAULT_MASS: ClassVar[int] = 0
    
    mass: int = Field(default=DEFAULT_MASS, ge=0, description="Weight placed on the pan")
    balance_mass: int = Field(default=0, ge=0, description="Counterweight added while balancing")
    
    @property
    def total_mass(self) -> int:
        """Mass including the counterweight."""
        return self.mass + self.balance_mass


# =============================================================================
# Sides
# =============================================================================

class LiteralSide(BaseModel):
    """A side carrying a directly specified weight."""
    
    kind: Literal["literal"] = "literal"
    pan: Pan = Field(default_factory=Pan)


class ReferenceSide(BaseModel):
    """A side pointing at another scale by name (lookup, not ownership)."""
    
    kind: Literal["reference"] = "reference"
    name: str


Side = Annotated[Union[LiteralSide, ReferenceSide], Field(discriminator="kind")]


# =============================================================================
# Scales
# =============================================================================

class Scale(BaseModel):
    """
    A composite pan with two sides.
    
    The scale's own weighable state lives in ``pan`` so that balancing and
    reporting can treat a referenced scale exactly like a literal pan.
    """
    
    DEFAULT_MASS: ClassVar[int] = 1
    
    name: str = Field(..., min_length=1, description="Unique scale identifier")
    self_mass: int = Field(default=1, ge=0, description="Weight of the scale hardware itself")
    pan: Pan = Field(default_factory=lambda: Pan(mass=Scale.DEFAULT_MASS))
    left: Side = Field(default_factory=LiteralSide)
    right: Side = Field(default_factory=LiteralSide)
    
    @property
    def mass(self) -> int:
        return self.pan.mass
    
    @property
    def balance_mass(self) -> int:
        return self.pan.balance_mass
    
    def referenced_names(self) -> list[str]:
        """Names of the scales hanging from this scale, left first."""
        return [
            side.name for side in (self.left, self.right)
            if isinstance(side, ReferenceSide)
        ]


class ParseIssue(BaseModel):
    """A rejected input line; undecodable bytes are kept as \\x escapes."""
    
    line_number: int
    line: str
    reason: str
    
    def __str__(self) -> str:
        quoted = self.line.replace("\\", "\\\\").replace('"', '\\"')
        return f'Invalid line {self.line_number}: "{quoted}"'


# =============================================================================
# Registry
# =============================================================================

class ScaleRegistry:
    """
    Ordered collection of every known scale plus a lookup by name.
    
    The registry is the sole owner of scales; sides only refer to them by
    name and are resolved through :meth:`resolve`.
    """
    
    def __init__(self, scale_self_mass: int = Scale.DEFAULT_MASS):
        self.scale_self_mass = scale_self_mass
        self.scales: list[Scale] = []
        self.by_name: dict[str, Scale] = {}
    
    def __len__(self) -> int:
        return len(self.scales)
    
    def __iter__(self) -> Iterator[Scale]:
        return iter(self.scales)
    
    def __contains__(self, name: object) -> bool:
        return name in self.by_name
    
    def get(self, name: str) -> Optional[Scale]:
        """Get scale by name."""
        return self.by_name.get(name)
    
    def get_or_create(self, name: str) -> Scale:
        """Return the named scale, registering a placeholder if it is new."""
        scale = self.by_name.get(name)
        if scale is None:
            scale = Scale(
                name=name,
                self_mass=self.scale_self_mass,
                pan=Pan(mass=self.scale_self_mass),
            )
            self.by_name[name] = scale
            self.scales.append(scale)
        return scale
    
    def names(self) -> list[str]:
        """Scale names in first-appearance order."""
        return [scale.name for scale in self.scales]
    
    def resolve(self, side: Side) -> Weighable:
        """Return the pan a side stands for."""
        if isinstance(side, LiteralSide):
            return side.pan
        
        scale = self.by_name.get(side.name)
        if scale is None:
            raise UnresolvedReferenceError(side.name)
        return scale.pan

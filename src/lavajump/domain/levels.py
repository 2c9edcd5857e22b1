from __future__ import annotations

from lavajump.domain.plan import plan_from_text

# Plan glyphs: x wall, ! lava, = lava moving sideways, | lava moving up/down,
# v dripping lava, o coin, @ player.

SIMPLE_PLAN = (
    "                            ",
    "                            ",
    "   x                  = x   ",
    "   x         o  o       x   ",
    "   x @      xxxxx       x   ",
    "   xxxxx                x   ",
    "       x!!!!!!!!!!!!x       ",
    "       xxxxxxxxxxxxxx       ",
    "                            ",
)

CAVERN_PLAN = plan_from_text("""
                                                      
                                                      
  x              = x                       v          
  x         o o    x                                  
  x @      xxxxx   x             o   o         |      
  xxxxx            x          xxxxxxxxxx              
      x!!!!!!!!!!!!x    o                       o  x  
      xxxxxxxxxxxxxx  xxxxx         xxxxx   xxxxxxxx  
                                                      
""")

LEVELS: dict[str, tuple[str, ...]] = {
    "simple": SIMPLE_PLAN,
    "cavern": CAVERN_PLAN,
}

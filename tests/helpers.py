"""Go sources shared by the tests."""


def go(*lines: str) -> str:
    """Join lines into a Go source text with a trailing newline."""
    return "\n".join(lines) + "\n"


SIMPLE = go(
    "package main",                    # 1
    "",                                # 2
    'import "fmt"',                    # 3
    "",                                # 4
    "func Hello() string {",           # 5
    '\treturn "hi"',                   # 6
    "}",                               # 7
    "",                                # 8
    "func Add(a int, b int) int {",    # 9
    "\treturn a + b",                  # 10
    "}",                               # 11
)

EARLY_RETURN = go(
    "package main",                    # 1
    "",                                # 2
    "func A(x int) {",                 # 3
    "\tif x == 5 {",                   # 4
    "\t\treturn",                      # 5
    "\t}",                             # 6
    '\tfmt.Println("x was not 5")',    # 7
    "}",                               # 8
)

MIXED = go(
    "package main",                                # 1
    "",                                            # 2
    "type Server struct {",                        # 3
    "\tport int",                                  # 4
    "}",                                           # 5
    "",                                            # 6
    "func external(x int) int",                    # 7
    "",                                            # 8
    "func Empty() {",                              # 9
    "}",                                           # 10
    "",                                            # 11
    "func (s *Server) Start(port int) error {",    # 12
    "\tif port == 0 {",                            # 13
    "\t\treturn errNoPort",                        # 14
    "\t}",                                         # 15
    "\ts.port = port",                             # 16
    "\treturn nil",                                # 17
    "}",                                           # 18
    "",                                            # 19
    "func Loop(n int) {",                          # 20
    "\t// count down",                             # 21
    "\tfor i := 0; i < n; i++ {",                  # 22
    "\t\tif i == 3 {",                             # 23
    "\t\t\treturn",                                # 24
    "\t\t}",                                       # 25
    "\t}",                                         # 26
    "\t// done",                                   # 27
    "}",                                           # 28
)

GROUPED = go(
    "package main",
    "",
    "func Bad(a, b int) int {",
    "\treturn a + b",
    "}",
)

BROKEN = go(
    "package main",
    "",
    "func broken( {",
    "}",
)

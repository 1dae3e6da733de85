from .. import config

USAGE = f"""\
Usage:
\t{config.PROG_NAME} color [position] color [position] [color [position]] [color [position]] ... [options] filename

Options:
\t/s,/size        Specifies the size of the gradient ({config.MIN_SIZE}-{config.MAX_SIZE}). Default: {config.DEFAULT_SIZE}.
\t/h,/horizontal  Produces an horizontal gradient (default).
\t/v,/vertical    Produces a vertical gradient.
\t/r,/reverse     Reverses the gradient direction.

Options are case-insensitive and also accept the -s, --size, --h, -v, -r forms.
Positions are percentages (e.g. 25%) and must be strictly increasing."""

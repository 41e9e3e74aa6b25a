""" Interactive "map" of the happy numbers, drawn the same way as a fractal: every cell of the grid is
    one number, coloured by how many steps it takes to settle.

    @requires: python3, numpy, matplotlib
    
    @author: phinc-tank
"""
import matplotlib.pyplot as plt
import numpy as np

from happy.happy import happy_orbit


MAX_ITERATIONS = 50 # Any int64 or uint64 settles within 20 steps


def _check_array(nn, minimum):
    """ @return: nn as an int64 (or uint64 if unsigned) array, if all its elements are integers >= minimum """
    nn = np.asarray(nn)
    if not np.issubdtype(nn.dtype, np.integer):
        raise TypeError("expected an integer array, got dtype %s"%nn.dtype)
    if (nn.size > 0) and (nn.min() < minimum):
        raise ValueError("expected all elements >= %d, got %d"%(minimum, nn.min()))
    if np.issubdtype(nn.dtype, np.unsignedinteger):
        return nn.astype(np.uint64) # Values above 2**63-1 would wrap in int64
    return nn.astype(np.int64) # Always a copy


def digit_square_sums(nn):
    """ Like digit_square_sum() but element by element.
        @param nn: integers >= 0, any shape.
        @return: the sums, same shape as nn """
    nn = _check_array(nn, 0)
    total = np.zeros_like(nn)
    while np.any(nn > 0):
        nn, digits = np.divmod(nn, 10)
        total += digits*digits
    return total


def happy_set(nn):
    """ Iterates all the numbers in nn at once until each one reaches either 1 (happy) or 4 (the unhappy cycle).
        @param nn: positive integers, any shape.
        @return: (happy, ticks) both the same shape as nn; happy is True for happy numbers and ticks is
                 the number of steps it took to get to 1 or 4. """
    nn = _check_array(nn, 1)
    ticks = np.zeros(nn.shape, dtype=int)
    running = (nn != 1) & (nn != 4)
    for tick in range(MAX_ITERATIONS):
        if not np.any(running):
            break
        nn[running] = digit_square_sums(nn[running])
        ticks[running] += 1
        running = (nn != 1) & (nn != 4)
    if np.any(running):
        raise RuntimeError("not settled after %d iterations: %s"%(MAX_ITERATIONS, nn[running][:5]))
    return (nn == 1), ticks


def happy_grid(start, rows, cols):
    """ @return: the numbers start..start+rows*cols-1 as a rows x cols array, row by row """
    return np.arange(start, start+rows*cols, dtype=np.int64).reshape(rows, cols)


def orbit_label(n):
    """ @return: e.g. "7: 7 > 49 > 97 > 130 > 10 > 1 (happy)" """
    orbit = happy_orbit(n)
    mood = "happy" if (orbit[-1] == 1) else "not happy"
    return "%d: %s (%s)"%(orbit[0], " > ".join(str(k) for k in orbit), mood)


def draw_map(start=1, rows=50, cols=50, cmap=None, show_ticks=True):
    """ Creates an interactive figure.
        After this you still need plt.show(block=True) to wait until it is destroyed by the user!
        @param start: the number in the top left corner, the rest follow row by row.
        @param show_ticks: False to only colour happy vs. unhappy, otherwise the colour also shows the number
                           of steps: positive for happy numbers and negative for unhappy ones.
        @return: (figure, axis) """
    grid = happy_grid(start, rows, cols)
    happy, ticks = happy_set(grid)
    if show_ticks:
        score = np.where(happy, 1+ticks, -1-ticks)
    else:
        score = happy.astype(int)

    fig, axis = plt.subplots(1, 1)
    axis._cmaps = list(plt.colormaps())
    if (cmap is not None):
        axis._cmaps.insert(0, cmap)
    img = axis.imshow(score, cmap=axis._cmaps[0], interpolation='nearest')
    axis.set_title("Happy numbers %d..%d"%(grid[0,0], grid[-1,-1]))

    # Change colmap when user presses 'm' and 'M' keys
    def on_keyboard(event):
        if (event.key in ['m','M']):
            if (event.key == 'm'):
                axis._cmaps.append(axis._cmaps.pop(0)) # Move current first to back
            else:
                axis._cmaps.insert(0, axis._cmaps.pop(-1)) # Move current last to front
            img.set_cmap(axis._cmaps[0])
            print("INFO: Switched cmap to %s"%axis._cmaps[0])
            event.canvas.draw()
    fig.canvas.mpl_connect('key_press_event', on_keyboard)

    # Show the orbit of the number under the mouse pointer
    def on_move(event):
        x, y = event.xdata, event.ydata
        if (x is not None) and (y is not None) and (event.inaxes == axis):
            row, col = int(round(y)), int(round(x)) # Cell centres are on whole numbers
            if (0 <= row < rows) and (0 <= col < cols):
                axis.set_title(orbit_label(grid[row,col]))
                event.canvas.draw_idle()
    fig.canvas.mpl_connect('motion_notify_event', on_move)

    return fig, axis


if __name__ == "__main__":
    draw_map(start=1, rows=100, cols=100, cmap='turbo_r')
    plt.show(block=True) # Interactive till the figure is closed

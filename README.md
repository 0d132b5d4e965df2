# chartforge

Build charts from plain Python lists and render them as SVG. Axis bounds and
delimiter intervals are chosen automatically from the data. You can adjust
them afterwards.

Each chart type has its own module:

| Module | Class | Shows |
| --- | --- | --- |
| `chartforge.area_chart` | `AreaChart` | trends over categories, with the area under each series filled |
| `chartforge.box_whisker_plot` | `BoxWhiskerPlot` | quartiles, median, whiskers and outliers for each data set |
| `chartforge.bubble_chart` | `BubbleChart` | x/y positions, with a third value setting bubble size |
| `chartforge.doughnut_chart` | `DoughnutChart` | proportions of a whole, one ring per data set |
| `chartforge.histogram` | `Histogram` | frequency distribution of a single data set |
| `chartforge.line_chart` | `LineChart` | trends over categories, highlighting order |

## Installation

```
pip install chartforge
```

The package has no runtime dependencies. It needs Python 3.10 or later.

## Usage

```python
from chartforge.line_chart import LineChart

chart = LineChart(
    "Monthly totals",
    ["Jan", "Feb", "Mar"],
    [[30.0, 50.0, 80.0], [20.0, 45.0, 60.0]],
)
chart.axis_prop.x_axis_title = "Month"
chart.axis_prop.y_axis_title = "Total"

chart.chart_prop.legend_values = ["Series 1", "Series 2"]
chart.chart_prop.show_legend = True

chart.save_svg("totals.svg")
```

There are two ways to get the output:

- `render()` returns the SVG document as a string.
- `save_svg(path)` writes the SVG document to a file.

When the legend is shown, the canvas is widened by 30% of the screen width to
make room for it.

`LineChart.set_data(data_labels, data)` replaces the data and recalculates
the axes. It also resets the chart properties, such as screen size and
legend, but keeps the title.

### Adjusting axes

Charts with axes carry an `AxisProp` as `axis_prop`, and every chart carries
a `ChartProp` as `chart_prop`:

```python
from chartforge.bubble_chart import BubbleChart

chart = BubbleChart(
    "Bubbles",
    [[1.0, 2.0, 3.0]],
    [[4.0, 5.0, 6.0]],
    [[10.0, 20.0, 30.0]],
)
chart.axis_prop.set_x_axis_bounds(0.0, 5.0)   # a new scale is recalculated
chart.axis_prop.set_x_axis_interval(0.5)      # call after setting bounds
chart.chart_prop.set_screen_size(900.0, 700.0)
```

How the axes behave:

- **Interval without bounds:** `set_x_axis_interval` and `set_y_axis_interval` raise `ValueError` if the axis bounds have zero width.
- **Categorical x-axis:** area, box and line charts ignore x-axis bounds.
- **Histogram y-axis:** it is always computed from the frequencies at draw time.
- **Doughnut chart:** it has no axes and no `axis_prop`.

The default screen size depends on which axes the data crosses zero on:

- 700×700 when it crosses neither axis.
- 800×700 when the x-axis crosses zero.
- 700×800 when the y-axis crosses zero.
- 800×800 when both do.

### Outlier warning

A data set may contain likely outliers, meaning values more than 1.5 times
the interquartile range beyond the quartiles. In that case, building a chart
issues a `UserWarning`, because outliers may distort the automatic axis
scaling.

### Lower-level pieces

These are available for use on their own:

- `chartforge.axis_prop`
  - `calc_data_range`, `calc_axis_props` and `calc_scale` choose bounds and delimiter scales.
  - `percentile` interpolates percentiles of sorted data.
  - `check_outliers` reports possible outliers.
- `chartforge.box_whisker_plot.box_statistics` returns the `BoxStats` for one data set.
- `chartforge.histogram.histogram_frequencies` counts values into equal ranges.
- `chartforge.doughnut_chart.proportions` turns each ring's values into fractions of that ring's total.
- `chartforge.drawing.Canvas` records path, fill, stroke and text operations.
  - `to_svg()` returns the SVG document.
  - `write(path)` saves it to a file.
  - Subclass `chartforge.drawing.Chart` and implement `draw_chart(canvas)` to draw a chart of your own on it.

## What it does not do

- **No display:** charts are only produced as SVG documents. Nothing is shown on screen, and no window or interactive viewer is opened.
- **Approximate text layout:** text sizes are estimated from character counts rather than measured from a font. Label fitting and placement are therefore approximate.
"""Webpack integration: webpack.config.js (CommonJS) with loaders per framework."""

from tailwind_mcp.integrations.base import BuildToolIntegration, js_list
from tailwind_mcp.integrations.css import CSSFramework, companion_files
from tailwind_mcp.npm import pinned
from tailwind_mcp.types import BuildToolConfig, BuildToolOutput


class WebpackIntegration(BuildToolIntegration):
    name = "webpack"
    display_name = "Webpack"
    supported_frameworks = frozenset({"react", "vue", "svelte", "angular"})
    extra_features = frozenset({"dev-server"})
    # the scaffold's "dev" script is `webpack serve`
    project_features = frozenset({"dev-server"})

    def _script_rules(self, config: BuildToolConfig, ts: bool) -> tuple[list[str], list[str]]:
        """(rule literals, packages) for compiling the framework's sources."""
        fw = config.framework
        if fw == "react":
            presets = ["'@babel/preset-env'", "['@babel/preset-react', { runtime: 'automatic' }]"]
            packages = ["babel-loader", "@babel/core", "@babel/preset-env", "@babel/preset-react"]
            if ts:
                presets.append("'@babel/preset-typescript'")
                packages.append("@babel/preset-typescript")
            rule = (
                "{\n"
                "  test: /\\.[jt]sx?$/,\n"
                "  exclude: /node_modules/,\n"
                "  use: {\n"
                "    loader: 'babel-loader',\n"
                f"    options: {{ presets: [{', '.join(presets)}] }},\n"
                "  },\n"
                "}"
            )
            return [rule], packages
        if fw == "angular":
            return ["{\n  test: /\\.[cm]?[tj]sx?$/,\n  loader: '@ngtools/webpack',\n}"], ["@ngtools/webpack"]

        rules, packages = [], []
        if fw == "vue":
            rules.append("{\n  test: /\\.vue$/,\n  loader: 'vue-loader',\n}")
            packages.append("vue-loader")
        else:
            rules.append(
                "{\n"
                "  test: /\\.svelte$/,\n"
                "  use: {\n"
                "    loader: 'svelte-loader',\n"
                "    options: { emitCss: true },\n"
                "  },\n"
                "}"
            )
            packages.append("svelte-loader")
        if ts:
            suffix = "\n  options: { appendTsSuffixTo: [/\\.vue$/] }," if fw == "vue" else ""
            rules.append(
                "{\n"
                "  test: /\\.ts$/,\n"
                "  exclude: /node_modules/,\n"
                f"  loader: 'ts-loader',{suffix}\n"
                "}"
            )
            packages.append("ts-loader")
        return rules, packages

    def _render(self, config: BuildToolConfig, css: CSSFramework) -> BuildToolOutput:
        production = self.is_production(config)
        ts = self.uses_typescript(config)
        dev_server = "dev-server" in config.features

        requires = [
            ("path", "path"),
            ("HtmlWebpackPlugin", "html-webpack-plugin"),
        ]
        plugins = ["new HtmlWebpackPlugin({ template: './index.html' })"]
        packages = ["webpack", "webpack-cli", "html-webpack-plugin", "css-loader"]

        if production:
            requires.append(("MiniCssExtractPlugin", "mini-css-extract-plugin"))
            plugins.append("new MiniCssExtractPlugin({ filename: '[name].[contenthash].css' })")
            packages.append("mini-css-extract-plugin")
            css_first = "MiniCssExtractPlugin.loader"
        else:
            packages.append("style-loader")
            css_first = "'style-loader'"

        if config.framework == "vue":
            requires.append(("{ VueLoaderPlugin }", "vue-loader"))
            plugins.append("new VueLoaderPlugin()")
        elif config.framework == "angular":
            requires.append(("{ AngularWebpackPlugin }", "@ngtools/webpack"))
            plugins.append("new AngularWebpackPlugin({ tsconfig: './tsconfig.json' })")

        rules, script_packages = self._script_rules(config, ts)
        packages += script_packages

        css_use = [css_first, "'css-loader'"]
        if css.needs_wiring:
            plugin_list = ", ".join(f"'{p}'" for p in css.postcss_plugins)
            css_use.append(
                "{\n"
                "  loader: 'postcss-loader',\n"
                f"  options: {{ postcssOptions: {{ plugins: [{plugin_list}] }} }},\n"
                "}"
            )
            packages += ["postcss-loader", *css.packages]
        rules.append(
            "{\n"
            "  test: /\\.css$/i,\n"
            "  use: [\n"
            + js_list([_indent(u, "    ") for u in css_use], "")
            + "\n  ],\n"
            "}"
        )

        extensions = {
            "react": [".tsx", ".ts", ".jsx", ".js"],
            "vue": [".ts", ".js", ".vue"],
            "svelte": [".ts", ".js", ".svelte"],
            "angular": [".ts", ".js"],
        }[config.framework]

        lines = [f"const {name} = require('{pkg}');" for name, pkg in requires]
        lines += [
            "",
            "/** @type {import('webpack').Configuration} */",
            "module.exports = {",
            f"  mode: '{config.optimization.value}',",
            f"  entry: './{config.entry_point.removeprefix('./')}',",
            "  output: {",
            f"    path: path.resolve(__dirname, '{config.output_dir}'),",
            f"    filename: '{'[name].[contenthash].js' if production else '[name].js'}',",
            "    publicPath: '/',",
            "    clean: true,",
            "  },",
            f"  devtool: {'false' if production else repr('eval-source-map')},",
            "  resolve: {",
            f"    extensions: [{', '.join(repr(e) for e in extensions)}],",
        ]
        if config.framework == "svelte":
            lines += [
                "    mainFields: ['svelte', 'browser', 'module', 'main'],",
                "    conditionNames: ['svelte', 'browser', 'import'],",
            ]
        lines += [
            "  },",
            "  module: {",
            "    rules: [",
            js_list([_indent(r, "      ") for r in rules], ""),
            "    ],",
            "  },",
            "  plugins: [",
            js_list(plugins, "    "),
            "  ],",
        ]
        if dev_server:
            packages.append("webpack-dev-server")
            lines += [
                "  devServer: {",
                f"    static: '{config.public_dir}',",
                "    hot: true,",
                "    historyApiFallback: true,",
                "    port: 3000,",
                "  },",
            ]
        if production:
            lines += [
                "  optimization: {",
                "    minimize: true,",
                "    splitChunks: { chunks: 'all' },",
                "  },",
            ]
        lines.append("};")

        return BuildToolOutput(
            filename="webpack.config.js",
            content="\n".join(lines) + "\n",
            dependencies=pinned(*dict.fromkeys(packages)),
            # postcss-loader carries the plugin list, so only the Tailwind config is needed
            files=companion_files(css, config.framework, with_postcss=False),
        )


def _indent(block: str, indent: str) -> str:
    return "\n".join(indent + line for line in block.splitlines())

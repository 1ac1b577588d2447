"""npm version ranges for every package a generated file can reference."""

PACKAGE_VERSIONS: dict[str, str] = {
    # ── Frameworks ──
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "@types/react": "^18.2.43",
    "@types/react-dom": "^18.2.17",
    "vue": "^3.4.0",
    "vue-tsc": "^1.8.27",
    "svelte": "^4.2.8",
    "svelte-check": "^3.6.2",
    "tslib": "^2.6.2",
    "@angular/core": "^17.0.0",
    "@angular/common": "^17.0.0",
    "@angular/compiler": "^17.0.0",
    "@angular/compiler-cli": "^17.0.0",
    "@angular/platform-browser": "^17.0.0",
    "rxjs": "^7.8.1",
    "zone.js": "^0.14.2",
    "typescript": "^5.3.3",

    # ── CSS ──
    "tailwindcss": "^3.4.0",
    "postcss": "^8.4.33",
    "autoprefixer": "^10.4.16",

    # ── Vite ──
    "vite": "^5.0.10",
    "@vitejs/plugin-react": "^4.2.1",
    "@vitejs/plugin-vue": "^5.0.2",
    "@sveltejs/vite-plugin-svelte": "^3.0.1",
    "@analogjs/vite-plugin-angular": "^1.0.0",
    "vite-plugin-pwa": "^0.17.4",
    "vitest": "^1.1.0",
    "jsdom": "^23.0.1",

    # ── Webpack ──
    "webpack": "^5.89.0",
    "webpack-cli": "^5.1.4",
    "webpack-dev-server": "^4.15.1",
    "html-webpack-plugin": "^5.6.0",
    "mini-css-extract-plugin": "^2.7.6",
    "css-loader": "^6.8.1",
    "style-loader": "^3.3.3",
    "postcss-loader": "^7.3.4",
    "babel-loader": "^9.1.3",
    "@babel/core": "^7.23.6",
    "@babel/preset-env": "^7.23.6",
    "@babel/preset-react": "^7.23.3",
    "@babel/preset-typescript": "^7.23.3",
    "ts-loader": "^9.5.1",
    "vue-loader": "^17.4.2",
    "svelte-loader": "^3.1.9",
    "@ngtools/webpack": "^17.0.0",

    # ── Next.js ──
    "next": "^14.0.4",
}


def pinned(*packages: str) -> dict[str, str]:
    """Map package names to their version ranges, preserving argument order."""
    return {name: PACKAGE_VERSIONS[name] for name in packages}

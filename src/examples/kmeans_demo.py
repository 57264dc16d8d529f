"""
Demo of Lloyd k-means on scalars and 2-D points.

This example shows how to:
1. Cluster a list of numbers with the scalar metric
2. Cluster 2-D coordinates with the Euclidean metric
3. Inspect the convergence history
"""

import sys
sys.path.append('..')

from lloyd import KMeans, run_kmeans


SCALARS = [1, 3, 5, 7, 9, 10, 12, 12, 14, 15, 17, 18, 19,
           22, 24, 26, 27, 29, 30, 31, 32, 35, 37, 49, 59]

POINTS = [(11, 52), (43, 24), (5, 57), (52, 4), (94, 22), (15, 56),
          (21, 47), (50, 14), (2, 86), (92, 25), (14, 34), (22, 27)]


def print_clusters(centroids, clusters):
    for k, (centroid, members) in enumerate(zip(centroids, clusters)):
        print(f"  cluster {k}: centroid={centroid}, members={members}")


def main(seed: int = 0):
    print("Scalar data, k=5")
    centroids, clusters = run_kmeans(SCALARS, k=5, metric='scalar', random_state=seed)
    order = sorted(range(len(centroids)), key=lambda i: centroids[i])
    print_clusters([centroids[i] for i in order], [clusters[i] for i in order])

    print("\n2-D points, k=5")
    kmeans = KMeans(n_clusters=5, metric='euclidean', random_state=seed, verbose=2)
    kmeans.fit(POINTS)
    print_clusters(kmeans.cluster_centers_, kmeans.clusters_)
    print(f"  iterations: {kmeans.n_iter_}, inertia: {kmeans.inertia_:.3f}")


if __name__ == '__main__':
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 0)
